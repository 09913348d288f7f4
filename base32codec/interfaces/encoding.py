"""Encoding interfaces for base32codec.

This module defines the protocol a binary-to-text codec satisfies, so code
that only needs to turn bytes into printable text and back can accept any
implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IBinaryEncoder(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into printable text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode printable text back into bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text is not a valid encoding.
        """
        ...
