"""Base32 formats and their lookup tables.

Two alphabets are supported:

- RFC 4648 (https://datatracker.ietf.org/doc/html/rfc4648#section-6),
  padded with ``=`` to a multiple of 8 characters.
- Crockford's Base32 (https://www.crockford.com/base32.html), never padded,
  with ``-`` accepted as an ignorable separator and ``I``/``L``/``O`` read as
  ``1``/``1``/``0`` on decode.

Decode tables are 256-entry tuples indexed directly by character code. An
entry is the 5-bit value of that character or ``None`` when it is invalid.
They are derived from the alphabets at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from base32codec.exceptions import InvalidOptionError

RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Excludes I, L, O and U
CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

PADDING = "="
SEPARATOR = "-"

# Indexed by len(data) % 5
_PADDING_BY_REMAINDER = (0, 6, 4, 3, 1)

VALID_PADDING_COUNTS = (0, 1, 3, 4, 6)

DecodeTable = Tuple[Optional[int], ...]


class Format(Enum):
    """Base32 format selector."""

    RFC4648 = "rfc"
    CROCKFORD = "crockford"

    @classmethod
    def parse(cls, value: Union[Format, str, None], op: str = "base32") -> Format:
        """Resolve a format selector.

        Args:
            value: A ``Format`` member, its string value, or ``None`` for the
                default (``Format.RFC4648``).
            op: Operation name reported if the value is rejected.

        Returns:
            The matching ``Format``.

        Raises:
            InvalidOptionError: If the value names no known format.
        """
        if value is None:
            return cls.RFC4648
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidOptionError(value, op)


@dataclass(frozen=True)
class FormatSpec:
    """Alphabet and structural rules for one format.

    Attributes:
        format: The format this spec describes.
        alphabet: The 32 output symbols, indexed by 5-bit value.
        decode_table: 256 entries mapping a character code to its 5-bit value.
        padding: Padding character, or ``None`` if the format never pads.
        separator: Ignorable separator character, or ``None``.
    """

    format: Format
    alphabet: str
    decode_table: DecodeTable
    padding: Optional[str] = None
    separator: Optional[str] = None


def build_decode_table(alphabet: str, aliases: Optional[Dict[str, str]] = None) -> DecodeTable:
    """Build a case-insensitive decode table for an alphabet.

    Args:
        alphabet: The 32 symbols in value order.
        aliases: Extra characters mapped onto an alphabet symbol.

    Returns:
        A 256-entry tuple of 5-bit values, ``None`` for invalid characters.
    """
    if len(alphabet) != 32:
        raise ValueError(f"alphabet must have 32 symbols, got {len(alphabet)}")

    table: list[Optional[int]] = [None] * 256
    for value, symbol in enumerate(alphabet):
        table[ord(symbol.upper())] = value
        table[ord(symbol.lower())] = value

    for alias, symbol in (aliases or {}).items():
        value = table[ord(symbol)]
        table[ord(alias.upper())] = value
        table[ord(alias.lower())] = value

    return tuple(table)


RFC4648_SPEC = FormatSpec(
    format=Format.RFC4648,
    alphabet=RFC4648_ALPHABET,
    decode_table=build_decode_table(RFC4648_ALPHABET),
    padding=PADDING,
)

CROCKFORD_SPEC = FormatSpec(
    format=Format.CROCKFORD,
    alphabet=CROCKFORD_ALPHABET,
    decode_table=build_decode_table(CROCKFORD_ALPHABET, {"I": "1", "L": "1", "O": "0"}),
    separator=SEPARATOR,
)

_SPECS = {
    Format.RFC4648: RFC4648_SPEC,
    Format.CROCKFORD: CROCKFORD_SPEC,
}


def spec_for(format: Format) -> FormatSpec:
    """Return the ``FormatSpec`` for a format."""
    return _SPECS[format]


def padding_length(length: int) -> int:
    """Number of ``=`` characters RFC 4648 appends for ``length`` input bytes."""
    return _PADDING_BY_REMAINDER[length % 5]
