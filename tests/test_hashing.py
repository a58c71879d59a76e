import pytest

from jsonc.hashing import (
    StringHash,
    char_hash,
    current_string_hash,
    hashlittle,
    perllike_str_hash,
    ptr_hash,
    set_string_hash,
)

PHRASE = b"Four score and seven years ago"


def test_hashlittle_empty_returns_initial_state():
    assert hashlittle(b"", 0) == 0xDEADBEEF


def test_hashlittle_reference_vectors():
    assert hashlittle(PHRASE, 0) == 0x17770551
    assert hashlittle(PHRASE, 1) == 0xCD628161


def test_hashlittle_str_and_bytes_agree():
    assert hashlittle("hello world", 7) == hashlittle(b"hello world", 7)


@pytest.mark.parametrize("size", [1, 4, 11, 12, 13, 24, 25, 100])
def test_hashlittle_is_32_bit_and_deterministic(size):
    data = bytes(range(size))
    first = hashlittle(data, 3)
    assert 0 <= first <= 0xFFFFFFFF
    assert hashlittle(data, 3) == first


def test_hashlittle_initval_matters():
    assert hashlittle(PHRASE, 0) != hashlittle(PHRASE, 1)


def test_perllike_empty_is_one():
    assert perllike_str_hash("") == 1


def test_perllike_recurrence():
    assert perllike_str_hash("ab") == (perllike_str_hash("a") * 33 + ord("b")) & 0xFFFFFFFF


def test_perllike_stops_at_nul():
    assert perllike_str_hash("ab\0cd") == perllike_str_hash("ab")


def test_char_hash_stable_and_stops_at_nul():
    assert char_hash("key") == char_hash("key")
    assert char_hash("ab\0zz") == char_hash("ab")
    assert 0 <= char_hash("key") <= 0xFFFFFFFF


def test_ptr_hash_identity():
    obj = object()
    assert ptr_hash(obj) == ptr_hash(obj)
    assert 0 <= ptr_hash(obj) < 2**64


def test_set_string_hash_selects_function():
    try:
        set_string_hash(StringHash.PERLLIKE)
        assert current_string_hash() is perllike_str_hash
        set_string_hash(StringHash.DEFAULT)
        assert current_string_hash() is char_hash
    finally:
        set_string_hash(StringHash.DEFAULT)


def test_set_string_hash_rejects_unknown():
    with pytest.raises(ValueError):
        set_string_hash(5)
    assert current_string_hash() is char_hash