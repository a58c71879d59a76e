import math

import pytest

from jsonc.tokstate import (
    UTF8_REPLACEMENT,
    StackFrame,
    State,
    Utf8Validator,
    decode_surrogate_pair,
    encode_codepoint,
    is_high_surrogate,
    is_low_surrogate,
    number_value,
)


def _feed_all(validator, data):
    return all(validator.feed(b) for b in data)


def test_stack_frame_defaults():
    frame = StackFrame()
    assert frame.state is State.EATWS
    assert frame.saved_state is State.START
    assert frame.current is None
    assert frame.field_name is None


@pytest.mark.parametrize("text", ["plain ascii", "é", "€uro", "\U0001F600", "mixed é € \U0001F600"])
def test_validator_accepts_valid_utf8(text):
    validator = Utf8Validator()
    assert _feed_all(validator, text.encode("utf-8"))
    assert validator.pending() == 0


def test_validator_tracks_pending_bytes():
    validator = Utf8Validator()
    data = "\U0001F600".encode("utf-8")
    assert validator.feed(data[0])
    assert validator.pending() == 3
    assert validator.feed(data[1])
    assert validator.pending() == 2


@pytest.mark.parametrize("data", [b"\xff", b"\x80", b"\xc3A", b"\xe2\x82"])
def test_validator_rejects_or_leaves_incomplete(data):
    validator = Utf8Validator()
    ok = _feed_all(validator, data)
    assert not ok or validator.pending() > 0


def test_surrogate_classification():
    high, low = "\U0001F600".encode("utf-16-be")[0:2], "\U0001F600".encode("utf-16-be")[2:4]
    hi = int.from_bytes(high, "big")
    lo = int.from_bytes(low, "big")
    assert is_high_surrogate(hi) and not is_low_surrogate(hi)
    assert is_low_surrogate(lo) and not is_high_surrogate(lo)
    assert not is_high_surrogate(ord("A"))


@pytest.mark.parametrize("char", ["\U0001F600", "\U00010000", "\U0010FFFF"])
def test_decode_surrogate_pair_round_trip(char):
    units = char.encode("utf-16-be")
    hi = int.from_bytes(units[0:2], "big")
    lo = int.from_bytes(units[2:4], "big")
    assert decode_surrogate_pair(hi, lo) == ord(char)


@pytest.mark.parametrize("cp", [0x0, 0x41, 0x7F, 0x80, 0x7FF, 0x800, 0xFFFD, 0xFFFF, 0x10000, 0x10FFFF])
def test_encode_codepoint_matches_utf8(cp):
    assert encode_codepoint(cp) == chr(cp).encode("utf-8")


@pytest.mark.parametrize("cp", [0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000])
def test_encode_codepoint_replacement(cp):
    assert encode_codepoint(cp) == UTF8_REPLACEMENT
    assert UTF8_REPLACEMENT.decode("utf-8") == "\ufffd"


def test_number_value_integers():
    assert number_value("123", False, False) == 123
    assert number_value("-5", False, False) == -5
    assert number_value(b"0", False, True) == 0


def test_number_value_uint64_range():
    assert number_value("18446744073709551615", False, False) == 2**64 - 1
    assert number_value("9223372036854775807", False, False) == 2**63 - 1


def test_number_value_clamps_overflow():
    assert number_value("-99999999999999999999", False, False) == -(2**63)
    assert number_value("99999999999999999999", False, False) == 2**64 - 1


def test_number_value_leading_zero():
    assert number_value("01", False, False) == 1
    with pytest.raises(ValueError):
        number_value("01", False, True)


def test_number_value_doubles():
    assert number_value("1.5", True, False) == 1.5
    assert number_value("-2.5e3", True, True) == -2.5e3
    assert math.isinf(number_value("1e999", True, False))


def test_number_value_trims_trailing_exponent_chars():
    assert number_value("123e+", True, False) == number_value("123", True, False)
    with pytest.raises(ValueError):
        number_value("123e+", True, True)


@pytest.mark.parametrize("text,is_double", [("-", False), ("-.", True), ("", False), ("1.2.3", True)])
def test_number_value_invalid(text, is_double):
    with pytest.raises(ValueError):
        number_value(text, is_double, False)