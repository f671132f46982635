import pytest

from ari.ascii import (
    eq_ignore_ascii_case,
    is_ascii,
    is_ascii_alphabetic,
    is_ascii_alphanumeric,
    is_ascii_control,
    is_ascii_digit,
    is_ascii_graphic,
    is_ascii_hexdigit,
    is_ascii_lowercase,
    is_ascii_punctuation,
    is_ascii_uppercase,
    is_ascii_whitespace,
    to_ascii_lowercase,
    to_ascii_uppercase,
)


def test_documented_combining_accent_example():
    assert to_ascii_uppercase("cafe\u0301") == "CAFE\u0301"


def test_documented_precomposed_example():
    assert to_ascii_uppercase("caf\u00e9") == "CAF\u00e9"


def test_bytes_case_mapping_leaves_high_bytes():
    data = b"abc\xe9XYZ"
    upper = to_ascii_uppercase(data)
    assert upper[:3] == b"ABC"
    assert upper[3] == 0xE9
    assert to_ascii_lowercase(upper) == to_ascii_lowercase(data)


def test_int_case_mapping():
    assert to_ascii_uppercase(ord("q")) == ord("Q")
    assert to_ascii_lowercase(ord("Q")) == ord("q")
    assert to_ascii_uppercase(ord("1")) == ord("1")


@pytest.mark.parametrize("text", ["Hello, World!", "ÀbC", "", "123"])
def test_case_round_trips(text):
    assert to_ascii_lowercase(to_ascii_uppercase(text)) == to_ascii_lowercase(text)
    assert len(to_ascii_uppercase(text)) == len(text)


def test_is_ascii():
    assert is_ascii("plain text")
    assert not is_ascii("naïve")
    assert is_ascii(b"\x00\x7f")
    assert not is_ascii(b"\x80")
    assert is_ascii(0x41)
    assert not is_ascii(0xFF)


def test_eq_ignore_ascii_case():
    assert eq_ignore_ascii_case("Hello", "hELLO")
    assert eq_ignore_ascii_case(b"ABC", b"abc")
    assert not eq_ignore_ascii_case("\u00e9", "\u00c9")
    assert not eq_ignore_ascii_case("abc", "abcd")
    assert not eq_ignore_ascii_case("abc", b"abc")


def test_letters():
    assert is_ascii_alphabetic("AbcXyz")
    assert not is_ascii_alphabetic("abc1")
    assert is_ascii_uppercase("ABC")
    assert not is_ascii_uppercase("ABc")
    assert is_ascii_lowercase(b"abc")
    assert not is_ascii_lowercase("é")


def test_digits():
    assert is_ascii_digit("0123456789")
    assert not is_ascii_digit("12a")
    assert is_ascii_hexdigit("deadBEEF09")
    assert not is_ascii_hexdigit("g")
    assert is_ascii_alphanumeric("abc123XYZ")
    assert not is_ascii_alphanumeric("abc_123")


def test_punctuation_and_graphic():
    assert is_ascii_punctuation("!/:@[`{~")
    assert not is_ascii_punctuation("a")
    assert is_ascii_graphic("!~aZ0")
    assert not is_ascii_graphic(" ")
    assert not is_ascii_graphic(0x7F)


def test_whitespace():
    assert is_ascii_whitespace(" \t\n\r\x0c")
    assert not is_ascii_whitespace("\x0b")
    assert not is_ascii_whitespace("\u00a0")


def test_control():
    assert is_ascii_control("\x00\x1f\x7f")
    assert not is_ascii_control(" ")
    assert is_ascii_control(0x1B)


@pytest.mark.parametrize(
    "predicate",
    [
        is_ascii_alphabetic,
        is_ascii_digit,
        is_ascii_whitespace,
        is_ascii_control,
        is_ascii_graphic,
    ],
)
def test_empty_input_satisfies_predicates(predicate):
    assert predicate("") is True
    assert predicate(b"") is True


def test_byte_out_of_range_raises():
    with pytest.raises(ValueError):
        is_ascii_digit(256)


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        is_ascii_digit(1.5)