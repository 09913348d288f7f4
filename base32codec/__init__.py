"""Base32 encoding for Python.

This package converts arbitrary bytes to and from printable Base32 text in
two alphabets: RFC 4648 Base32 and Crockford's Base32.

Main Components:
    - encode / decode / try_decode: Stateless functions taking a format
    - Base32Codec: Codec object bound to one format via CodecConfig
    - Format: Format selector (``"rfc"`` or ``"crockford"``)
    - Exceptions: Base32Error and its typed subclasses

Example:
    >>> from base32codec import decode, encode
    >>> encode(b"foobar")
    'MZXW6YTBOI======'
    >>> decode("CSQPYRKIE8", "crockford")
    b'foobar'
"""

import logging

from base32codec.api import (
    Base32Codec,
    CodecConfig,
    DecodeResult,
    decode,
    encode,
    try_decode,
)
from base32codec.exceptions import (
    Base32Error,
    DecodeError,
    ErrorKind,
    IllegalCharacterError,
    InvalidArgumentError,
    InvalidLengthError,
    InvalidOptionError,
    InvalidPaddingError,
)
from base32codec.formats import (
    CROCKFORD_ALPHABET,
    RFC4648_ALPHABET,
    Format,
)
from base32codec.interfaces import IBinaryEncoder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # API
    "encode",
    "decode",
    "try_decode",
    "DecodeResult",
    "Base32Codec",
    "CodecConfig",
    "IBinaryEncoder",
    # Formats
    "Format",
    "RFC4648_ALPHABET",
    "CROCKFORD_ALPHABET",
    # Exceptions
    "Base32Error",
    "ErrorKind",
    "DecodeError",
    "InvalidOptionError",
    "InvalidArgumentError",
    "InvalidLengthError",
    "InvalidPaddingError",
    "IllegalCharacterError",
]
