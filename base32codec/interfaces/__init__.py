"""base32codec interfaces package.

This package provides protocol definitions for encoders.
"""

from .encoding import IBinaryEncoder

__all__ = [
    "IBinaryEncoder",
]
