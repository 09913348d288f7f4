"""Tests for Base32 encoding."""

from __future__ import annotations

import pytest

from base32codec import (
    CROCKFORD_ALPHABET,
    RFC4648_ALPHABET,
    ErrorKind,
    Format,
    InvalidArgumentError,
    InvalidOptionError,
    encode,
)

# RFC 4648 section 10 test vectors
RFC_VECTORS = [
    (b"", ""),
    (b"f", "MY======"),
    (b"fo", "MZXQ===="),
    (b"foo", "MZXW6==="),
    (b"foob", "MZXW6YQ="),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI======"),
]

CROCKFORD_VECTORS = [
    (b"", ""),
    (b"f", "CR"),
    (b"fo", "CSQG"),
    (b"foo", "CSQPY"),
    (b"foob", "CSQPYRG"),
    (b"fooba", "CSQPYRK1"),
    (b"foobar", "CSQPYRK1E8"),
]


@pytest.mark.parametrize("data,expected", RFC_VECTORS)
def test_rfc_vectors(data: bytes, expected: str) -> None:
    """Test encoding the RFC 4648 test vectors."""
    assert encode(data) == expected
    assert encode(data, "rfc") == expected
    assert encode(data, Format.RFC4648) == expected


@pytest.mark.parametrize("data,expected", CROCKFORD_VECTORS)
def test_crockford_vectors(data: bytes, expected: str) -> None:
    """Test encoding in Crockford format."""
    assert encode(data, "crockford") == expected
    assert encode(data, Format.CROCKFORD) == expected


@pytest.mark.parametrize(
    "data,padding",
    [(b"a", 6), (b"ab", 4), (b"abc", 3), (b"abcd", 1), (b"abcde", 0)],
)
def test_rfc_padding_by_length(data: bytes, padding: int) -> None:
    """Test that RFC output pads to 8 characters with the expected count."""
    encoded = encode(data)
    assert len(encoded) == 8
    assert encoded.count("=") == padding
    assert encoded.endswith("=" * padding)


def test_rfc_output_length_is_multiple_of_eight() -> None:
    """Test RFC output length and padding for a range of input lengths."""
    for length in range(0, 41):
        encoded = encode(bytes(range(length)))
        assert len(encoded) % 8 == 0
        stripped = encoded.rstrip("=")
        assert len(stripped) == (length * 8 + 4) // 5
        assert len(encoded) - len(stripped) in (0, 1, 3, 4, 6)


def test_crockford_never_pads() -> None:
    """Test that Crockford output has no padding and is ceil(n*8/5) long."""
    for length in range(0, 41):
        encoded = encode(bytes(range(length)), "crockford")
        assert "=" not in encoded
        assert len(encoded) == (length * 8 + 4) // 5


def test_output_uses_only_alphabet() -> None:
    """Test that every output symbol belongs to the format's alphabet."""
    data = bytes(range(256))
    assert set(encode(data).rstrip("=")) <= set(RFC4648_ALPHABET)
    assert set(encode(data, "crockford")) <= set(CROCKFORD_ALPHABET)


def test_all_zero_and_all_one_bits() -> None:
    """Test the extreme symbols of each alphabet."""
    assert encode(b"\x00" * 5) == "AAAAAAAA"
    assert encode(b"\xff" * 5) == "77777777"
    assert encode(b"\x00" * 5, "crockford") == "00000000"
    assert encode(b"\xff" * 5, "crockford") == "ZZZZZZZZ"


def test_bytes_like_inputs() -> None:
    """Test that bytearray, memoryview and str are accepted."""
    assert encode(bytearray(b"foobar")) == "MZXW6YTBOI======"
    assert encode(memoryview(b"foobar")) == "MZXW6YTBOI======"
    assert encode("foobar") == "MZXW6YTBOI======"
    assert encode("foobar", "crockford") == "CSQPYRK1E8"


def test_str_input_is_utf8_encoded() -> None:
    """Test that text input is encoded as UTF-8 before Base32."""
    assert encode("é") == encode("é".encode("utf-8"))


@pytest.mark.parametrize("format", ["invalid", "base64", "hex", "RFC", 1])
def test_invalid_format(format: object) -> None:
    """Test that unknown formats are rejected."""
    with pytest.raises(InvalidOptionError) as exc_info:
        encode(b"test", format)  # type: ignore[arg-type]

    assert exc_info.value.kind is ErrorKind.INVALID_OPTION
    assert exc_info.value.option == format
    assert "invalid option" in str(exc_info.value)


def test_invalid_format_rejected_for_empty_input() -> None:
    """Test that the format is checked even when there is nothing to encode."""
    with pytest.raises(InvalidOptionError):
        encode(b"", "hex")


@pytest.mark.parametrize("data", [123, None, 1.5, [1, 2, 3]])
def test_invalid_argument(data: object) -> None:
    """Test that non-bytes input is rejected."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        encode(data)  # type: ignore[arg-type]

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT
