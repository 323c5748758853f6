import secrets

import pytest

from rcli.core.crypto import codec
from rcli.core.errors import InvalidEncodingError


def test_encode_uses_url_safe_alphabet_without_padding():
    assert codec.encode(b"\xfb\xff") == "-_8"
    assert codec.encode(b"Hello World") == "SGVsbG8gV29ybGQ"


def test_empty_input():
    assert codec.encode(b"") == ""
    assert codec.decode("") == b""


def test_decode_trims_surrounding_whitespace():
    assert codec.decode("  SGVsbG8gV29ybGQ\n") == b"Hello World"


def test_decode_accepts_bytes():
    assert codec.decode(b"-_8\n") == b"\xfb\xff"


@pytest.mark.parametrize("size", [1, 2, 3, 31, 32, 64, 1000])
def test_round_trip(size):
    data = secrets.token_bytes(size)
    assert codec.decode(codec.encode(data)) == data


@pytest.mark.parametrize("text", ["SGVsbG8=", "ab+c", "ab/c", "ab c", "héllo", "a"])
def test_decode_rejects_malformed_text(text):
    with pytest.raises(InvalidEncodingError):
        codec.decode(text)


def test_decode_rejects_non_ascii_bytes():
    with pytest.raises(InvalidEncodingError):
        codec.decode(b"\xff\xfe")


def test_invalid_encoding_is_a_value_error():
    with pytest.raises(ValueError):
        codec.decode("*")


@pytest.mark.parametrize("text", ["AB", "AP", "AAB", "-_9"])
def test_decode_rejects_nonzero_trailing_bits(text):
    with pytest.raises(InvalidEncodingError):
        codec.decode(text)


def test_canonical_text_round_trips():
    assert codec.decode("AA") == b"\x00"
    assert codec.encode(codec.decode("AAA")) == "AAA"


def test_each_byte_string_has_one_accepted_encoding():
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
    text = codec.encode(secrets.token_bytes(32))
    last = alphabet.index(text[-1])

    # 32 bytes leave two unused bits in the final character
    for offset in (1, 2, 3):
        variant = text[:-1] + alphabet[last + offset]
        with pytest.raises(InvalidEncodingError):
            codec.decode(variant)
