"""Base32 encoder.

This module turns byte sequences into Base32 text. Input is consumed in
groups of 5 bytes (40 bits), each emitting 8 symbols; a final partial group
is zero-padded on the right to a whole symbol.
"""

from __future__ import annotations

from typing import Union

from base32codec.exceptions import InvalidArgumentError
from base32codec.formats import Format, padding_length, spec_for

OP = "base32.encode"

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: object) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise InvalidArgumentError(data, OP)


def encode(data: Union[BytesLike, str], format: Union[Format, str, None] = Format.RFC4648) -> str:
    """Encode bytes as Base32 text.

    Args:
        data: The bytes to encode. A ``str`` is UTF-8 encoded first.
        format: ``"rfc"`` (default) or ``"crockford"``, or a ``Format``.

    Returns:
        The encoded text. RFC 4648 output is padded with ``=`` to a multiple
        of 8 characters; Crockford output is never padded.

    Raises:
        InvalidArgumentError: If ``data`` is not bytes-like or ``str``.
        InvalidOptionError: If ``format`` is not recognized.

    Example:
        >>> encode(b"foobar")
        'MZXW6YTBOI======'
        >>> encode(b"foobar", "crockford")
        'CSQPYRK1E8'
    """
    src = _as_bytes(data)
    spec = spec_for(Format.parse(format, OP))

    if not src:
        return ""

    alphabet = spec.alphabet
    out = []
    full = len(src) - len(src) % 5

    for i in range(0, full, 5):
        acc = int.from_bytes(src[i : i + 5], "big")
        out.append(alphabet[(acc >> 35) & 0x1F])
        out.append(alphabet[(acc >> 30) & 0x1F])
        out.append(alphabet[(acc >> 25) & 0x1F])
        out.append(alphabet[(acc >> 20) & 0x1F])
        out.append(alphabet[(acc >> 15) & 0x1F])
        out.append(alphabet[(acc >> 10) & 0x1F])
        out.append(alphabet[(acc >> 5) & 0x1F])
        out.append(alphabet[acc & 0x1F])

    # 1-4 trailing bytes
    if full < len(src):
        acc = int.from_bytes(src[full:], "big")
        nbits = (len(src) - full) * 8
        while nbits >= 5:
            nbits -= 5
            out.append(alphabet[(acc >> nbits) & 0x1F])
        if nbits > 0:
            out.append(alphabet[(acc << (5 - nbits)) & 0x1F])

    if spec.padding is not None:
        out.append(spec.padding * padding_length(len(src)))

    return "".join(out)
