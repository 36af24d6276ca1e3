import pytest

from flybinds.text import (
    MAX_TEXT_LENGTH,
    UTF_INVALID,
    decode_all,
    truncate_text,
    utf8_decode,
)


def test_ascii():
    assert utf8_decode(b"A") == (ord("A"), 1)


@pytest.mark.parametrize("char", ["é", "␣", "€", "𝄞"])
def test_multibyte(char):
    encoded = char.encode()
    assert utf8_decode(encoded) == (ord(char), len(encoded))


def test_only_first_character_is_decoded():
    assert utf8_decode("é!".encode()) == (ord("é"), 2)


def test_empty_input():
    assert utf8_decode(b"") == (UTF_INVALID, 0)


def test_invalid_lead_byte():
    assert utf8_decode(b"\xff") == (UTF_INVALID, 1)


def test_lone_continuation_byte():
    assert utf8_decode(b"\x80") == (UTF_INVALID, 1)


def test_overlong_encoding_is_invalid():
    assert utf8_decode(b"\xc0\x80") == (UTF_INVALID, 2)


def test_surrogate_is_invalid():
    assert utf8_decode(b"\xed\xa0\x80") == (UTF_INVALID, 3)


def test_bad_continuation_stops_early():
    assert utf8_decode(b"\xc3A") == (UTF_INVALID, 1)


def test_truncated_sequence_has_no_length():
    assert utf8_decode("€".encode()[:2]) == (UTF_INVALID, 0)


def test_decode_all_round_trip():
    text = "héllo ␣ € 𝄞 -> ok"
    assert list(decode_all(text.encode())) == [ord(c) for c in text]


def test_decode_all_truncated_tail():
    data = b"a" + "€".encode()[:2]
    assert list(decode_all(data)) == [ord("a"), UTF_INVALID]


def test_decode_all_invalid_bytes_progress():
    result = list(decode_all(b"\xff\xfe"))
    assert result == [UTF_INVALID, UTF_INVALID]


def test_truncate_fitting_text_unchanged():
    assert truncate_text("hello", 10, len) == "hello"


def test_truncate_exact_fit_unchanged():
    assert truncate_text("hello", 5, len) == "hello"


def test_truncate_adds_dots():
    result = truncate_text("hello world", 5, len)
    assert result.endswith("...")
    assert len(result) <= 5
    assert result == "h..."


def test_truncate_nothing_fits():
    assert truncate_text("hello", 0, len) == ""


def test_truncate_long_text_capped():
    text = "x" * (MAX_TEXT_LENGTH + 10)
    result = truncate_text(text, 10 ** 6, len)
    assert len(result) == MAX_TEXT_LENGTH
    assert result.endswith("...")