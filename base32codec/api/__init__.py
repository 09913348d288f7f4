"""base32codec API package.

This package provides the Base32 encoder, decoder and configured codec.
"""

from base32codec.api.codec import Base32Codec, CodecConfig
from base32codec.api.decoder import DecodeResult, decode, try_decode
from base32codec.api.encoder import encode

__all__ = [
    # Functions
    "encode",
    "decode",
    "try_decode",
    "DecodeResult",
    # Codec
    "Base32Codec",
    "CodecConfig",
]
