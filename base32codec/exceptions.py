"""Exception classes for base32codec.

This module defines the error taxonomy used by the encoder and decoder. Every
error carries a machine-readable ``kind`` plus the context needed to report
it, so callers can branch on the failure without parsing messages.
"""

from __future__ import annotations

import errno as errno_codes
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure reported by the codec."""

    INVALID_OPTION = "invalid_option"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_LENGTH = "invalid_length"
    INVALID_PADDING = "invalid_padding"
    ILLEGAL_CHARACTER = "illegal_character"


class Base32Error(Exception):
    """Base exception class for all base32codec errors.

    Attributes:
        kind: The failure kind.
        op: The operation that failed, e.g. ``"base32.decode"``.
        errno: The closest standard errno code for the failure.
        message: Human-readable description.
    """

    kind: ErrorKind

    def __init__(self, message: str, op: str, errno: int) -> None:
        super().__init__(message)
        self.message = message
        self.op = op
        self.errno = errno

    def __str__(self) -> str:
        return f"{self.op}: {self.message}"


class InvalidOptionError(Base32Error, ValueError):
    """Exception raised when the format selector is not recognized."""

    kind = ErrorKind.INVALID_OPTION

    def __init__(self, option: object, op: str = "base32") -> None:
        super().__init__(f"invalid option {option!r}", op, errno_codes.EINVAL)
        self.option = option


class InvalidArgumentError(Base32Error, TypeError):
    """Exception raised when the input is not text or bytes."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: object, op: str) -> None:
        argument_type = type(argument).__name__
        super().__init__(
            f"expected str or bytes-like object, got {argument_type}",
            op,
            errno_codes.EINVAL,
        )
        self.argument_type = argument_type


class DecodeError(Base32Error, ValueError):
    """Base class for errors caused by malformed encoded input."""

    def __init__(self, message: str, errno: int = errno_codes.EINVAL) -> None:
        super().__init__(message, "base32.decode", errno)


class InvalidLengthError(DecodeError):
    """Exception raised when RFC 4648 input is not a multiple of 8 long."""

    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, length: int) -> None:
        super().__init__("RFC 4648 Base32 requires input length to be a multiple of 8")
        self.length = length


class InvalidPaddingError(DecodeError):
    """Exception raised when RFC 4648 input has an impossible padding count.

    Attributes:
        padding: Number of trailing padding characters seen. Counting stops
            at 7 once the maximum of 6 has been exceeded.
    """

    kind = ErrorKind.INVALID_PADDING

    def __init__(self, padding: int) -> None:
        super().__init__("RFC 4648 Base32 padding length must be 0, 1, 3, 4, or 6")
        self.padding = padding


class IllegalCharacterError(DecodeError):
    """Exception raised for a character outside the active alphabet.

    Attributes:
        character: The offending character.
        byte: Its code (the byte value for bytes input).
        position: 1-based offset of the character in the original input.
    """

    kind = ErrorKind.ILLEGAL_CHARACTER

    def __init__(self, byte: int, position: int, character: Optional[str] = None) -> None:
        if character is None:
            character = chr(byte)
        super().__init__(
            f"Illegal character in Base32 string: '{character}' (0x{byte:02X}) "
            f"at position {position}",
            errno_codes.EILSEQ,
        )
        self.character = character
        self.byte = byte
        self.position = position
