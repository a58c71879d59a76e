import pytest

from jsonc.printbuf import PrintBuf


def test_new_buffer_is_empty():
    pb = PrintBuf()
    assert len(pb) == 0
    assert bytes(pb) == b""


def test_append_bytes_returns_size():
    pb = PrintBuf()
    assert pb.append(b"abc") == 3
    assert pb.append(b"de") == 2
    assert bytes(pb) == b"abcde"
    assert len(pb) == 5


def test_append_str_is_utf8_encoded():
    pb = PrintBuf()
    size = pb.append("\u00e9")
    assert size == len("\u00e9".encode("utf-8"))
    assert bytes(pb) == "\u00e9".encode("utf-8")


def test_append_grows_beyond_initial_size():
    pb = PrintBuf()
    chunk = b"x" * 1000
    for _ in range(5):
        pb.append(chunk)
    assert len(pb) == 5000
    assert bytes(pb) == chunk * 5


def test_reset_clears():
    pb = PrintBuf()
    pb.append(b"hello")
    pb.reset()
    assert len(pb) == 0
    pb.append(b"x")
    assert bytes(pb) == b"x"


def test_memset_at_end():
    pb = PrintBuf()
    pb.append(b"ab")
    pb.memset(-1, ord(" "), 3)
    assert bytes(pb) == b"ab   "


def test_memset_overwrites_within():
    pb = PrintBuf()
    pb.append(b"abcdef")
    pb.memset(1, ord("z"), 2)
    assert bytes(pb) == b"azzdef"
    assert len(pb) == 6


def test_memset_extends_past_end():
    pb = PrintBuf()
    pb.append(b"abc")
    pb.memset(2, ord("-"), 4)
    assert bytes(pb) == b"ab----"


def test_memset_gap_is_zero_filled():
    pb = PrintBuf()
    pb.memset(2, ord("q"), 1)
    assert bytes(pb) == b"\x00\x00q"


def test_memset_negative_length_rejected():
    pb = PrintBuf()
    with pytest.raises(ValueError):
        pb.memset(0, 0, -1)


def test_sprintf_formats_and_returns_size():
    pb = PrintBuf()
    n = pb.sprintf("%d:%s", 42, "ok")
    assert bytes(pb) == b"42:ok"
    assert n == len(pb)


def test_sprintf_escaped_percent():
    pb = PrintBuf()
    pb.sprintf("100%%")
    assert bytes(pb) == b"100%"


def test_sprintf_long_output():
    pb = PrintBuf()
    long_text = "y" * 300
    n = pb.sprintf("%s", long_text)
    assert n == 300
    assert bytes(pb) == long_text.encode()