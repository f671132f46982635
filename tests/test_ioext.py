import io

import pytest

from ari.ioext import (
    position,
    read_as_bytes,
    read_as_string,
    read_bytes_16,
    read_bytes_32,
    read_enter_key,
    read_vec,
)


def test_read_as_string_decodes_utf8():
    text = "héllo wörld"
    assert read_as_string(io.BytesIO(text.encode("utf-8"))) == text


def test_read_as_string_from_text_stream():
    assert read_as_string(io.StringIO("plain text")) == "plain text"


def test_read_as_string_rejects_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        read_as_string(io.BytesIO(b"\xff\xfe\xfd"))


def test_read_as_bytes_reads_everything():
    data = bytes(range(200))
    stream = io.BytesIO(data)
    assert read_as_bytes(stream) == data
    assert stream.read() == b""


def test_read_vec_reads_exact_count():
    stream = io.BytesIO(b"abcdef")
    assert read_vec(stream, 4) == b"abcd"
    assert stream.read() == b"ef"


def test_read_vec_zero():
    assert read_vec(io.BytesIO(b"abc"), 0) == b""


def test_read_vec_short_stream_raises():
    with pytest.raises(EOFError):
        read_vec(io.BytesIO(b"abc"), 4)


def test_read_vec_negative_count_raises():
    with pytest.raises(ValueError):
        read_vec(io.BytesIO(b"abc"), -1)


def test_read_bytes_16_and_32():
    data = bytes(range(64))
    stream = io.BytesIO(data)
    first = read_bytes_16(stream)
    second = read_bytes_32(stream)
    assert first == data[:16]
    assert second == data[16:48]


def test_read_bytes_32_short_raises():
    with pytest.raises(EOFError):
        read_bytes_32(io.BytesIO(bytes(31)))


def test_position_tracks_reads():
    stream = io.BytesIO(b"0123456789")
    assert position(stream) == 0
    stream.read(3)
    assert position(stream) == 3
    stream.seek(7)
    assert position(stream) == 7


def test_read_enter_key_consumes_through_newline():
    stream = io.BytesIO(b"abc\ndef")
    read_enter_key(stream)
    assert stream.read() == b"def"


def test_read_enter_key_text_stream():
    stream = io.StringIO("\nrest")
    read_enter_key(stream)
    assert stream.read() == "rest"


def test_read_enter_key_without_newline_raises():
    with pytest.raises(EOFError):
        read_enter_key(io.BytesIO(b"no newline"))