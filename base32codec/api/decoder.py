"""Base32 decoder.

This module turns Base32 text back into bytes. Symbols are shifted five bits
at a time into an integer accumulator; every 40 bits yields 5 output bytes
and whatever whole bytes remain at the end are flushed. Trailing bits short
of a byte are the zero fill of the last symbol and are dropped.

Two surfaces are provided: ``decode`` raises a ``DecodeError`` subclass on
malformed input, ``try_decode`` returns it as a value instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

from base32codec.exceptions import (
    DecodeError,
    IllegalCharacterError,
    InvalidArgumentError,
    InvalidLengthError,
    InvalidPaddingError,
)
from base32codec.formats import VALID_PADDING_COUNTS, Format, FormatSpec, spec_for

logger = logging.getLogger(__name__)

OP = "base32.decode"

MAX_PADDING = max(VALID_PADDING_COUNTS)

DecodeResult = Tuple[Optional[bytes], Optional[DecodeError]]


def _as_codes(text: object) -> Sequence[int]:
    """Return the input as a sequence of character codes."""
    if isinstance(text, str):
        return [ord(c) for c in text]
    if isinstance(text, (bytes, bytearray)):
        return text
    if isinstance(text, memoryview):
        return text.tobytes()
    raise InvalidArgumentError(text, OP)


def _strip_padding(codes: Sequence[int], padding: str) -> int:
    """Validate RFC 4648 padding and return the length without it.

    Raises:
        InvalidPaddingError: If the trailing padding count is not 0, 1, 3, 4 or 6.
    """
    pad = ord(padding)
    end = len(codes)
    npad = 0
    while end > 0 and codes[end - 1] == pad:
        end -= 1
        npad += 1
        if npad > MAX_PADDING:
            raise InvalidPaddingError(npad)
    if npad not in VALID_PADDING_COUNTS:
        raise InvalidPaddingError(npad)
    return end


def _decode(codes: Sequence[int], spec: FormatSpec) -> bytes:
    end = len(codes)

    if spec.padding is not None:
        if end % 8 != 0:
            raise InvalidLengthError(end)
        end = _strip_padding(codes, spec.padding)

    table = spec.decode_table
    skip = ord(spec.separator) if spec.separator is not None else None
    out = bytearray()
    acc = 0
    nbits = 0

    for i in range(end):
        c = codes[i]
        if c == skip:
            continue

        value = table[c] if c < 256 else None
        if value is None:
            raise IllegalCharacterError(c, i + 1)

        acc = (acc << 5) | value
        nbits += 5
        if nbits >= 40:
            nbits -= 40
            out += ((acc >> nbits) & 0xFFFFFFFFFF).to_bytes(5, "big")
            acc &= (1 << nbits) - 1

    while nbits >= 8:
        nbits -= 8
        out.append((acc >> nbits) & 0xFF)

    return bytes(out)


def try_decode(
    text: Union[str, bytes, bytearray, memoryview],
    format: Union[Format, str, None] = Format.RFC4648,
) -> DecodeResult:
    """Decode Base32 text, returning failures as values.

    Args:
        text: The encoded text, as ``str`` or bytes-like.
        format: ``"rfc"`` (default) or ``"crockford"``, or a ``Format``.

    Returns:
        ``(data, None)`` on success or ``(None, error)`` when the input is
        malformed. No partial data is returned on failure.

    Raises:
        InvalidArgumentError: If ``text`` is neither ``str`` nor bytes-like.
        InvalidOptionError: If ``format`` is not recognized.
    """
    codes = _as_codes(text)
    spec = spec_for(Format.parse(format, OP))

    if not codes:
        return b"", None

    try:
        return _decode(codes, spec), None
    except DecodeError as err:
        logger.debug(
            "rejected %s input of length %d: %s",
            spec.format.value,
            len(codes),
            err.kind.value,
        )
        return None, err


def decode(
    text: Union[str, bytes, bytearray, memoryview],
    format: Union[Format, str, None] = Format.RFC4648,
) -> bytes:
    """Decode Base32 text into bytes.

    Decoding is case-insensitive. In Crockford format ``-`` is ignored
    wherever it appears and ``I``, ``L`` and ``O`` are read as ``1``, ``1``
    and ``0``.

    Args:
        text: The encoded text, as ``str`` or bytes-like.
        format: ``"rfc"`` (default) or ``"crockford"``, or a ``Format``.

    Returns:
        The decoded bytes.

    Raises:
        InvalidArgumentError: If ``text`` is neither ``str`` nor bytes-like.
        InvalidOptionError: If ``format`` is not recognized.
        InvalidLengthError: If RFC 4648 input is not a multiple of 8 long.
        InvalidPaddingError: If RFC 4648 padding is not 0, 1, 3, 4 or 6 long.
        IllegalCharacterError: If a character is outside the alphabet.

    Example:
        >>> decode("MZXW6YTBOI======")
        b'foobar'
        >>> decode("CSQP-YRKI-E8", "crockford")
        b'foobar'
    """
    data, err = try_decode(text, format)
    if err is not None:
        raise err
    return data
