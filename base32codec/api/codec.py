"""Configured Base32 codec.

This module provides ``Base32Codec``, which binds a format once so callers
can pass a single object wherever an ``IBinaryEncoder`` is expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from base32codec.api.decoder import DecodeResult, decode, try_decode
from base32codec.api.encoder import BytesLike, encode
from base32codec.formats import Format, FormatSpec, spec_for
from base32codec.interfaces import IBinaryEncoder


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Base32 codec.

    Attributes:
        format: The Base32 format to use. Accepts a ``Format`` or its string
            value; normalized to a ``Format`` on construction.
    """

    format: Format = Format.RFC4648

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", Format.parse(self.format))


class Base32Codec(IBinaryEncoder):
    """Base32 encoder/decoder bound to one format.

    Example:
        >>> codec = Base32Codec(CodecConfig(format="crockford"))
        >>> codec.encode(b"foobar")
        'CSQPYRK1E8'
        >>> codec.decode("csqp-yrk1-e8")
        b'foobar'
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration. Defaults to RFC 4648.
        """
        self.config = config or CodecConfig()

    @property
    def format(self) -> Format:
        return self.config.format

    @property
    def spec(self) -> FormatSpec:
        return spec_for(self.config.format)

    def encode(self, data: Union[BytesLike, str]) -> str:
        """Encode bytes with the configured format."""
        return encode(data, self.config.format)

    def decode(self, text: Union[str, BytesLike]) -> bytes:
        """Decode text with the configured format.

        Raises:
            DecodeError: If the text is not valid in the configured format.
        """
        return decode(text, self.config.format)

    def try_decode(self, text: Union[str, BytesLike]) -> DecodeResult:
        """Decode text, returning ``(data, error)`` instead of raising."""
        return try_decode(text, self.config.format)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.config.format.value!r})"
