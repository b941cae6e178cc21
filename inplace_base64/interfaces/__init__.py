"""inplace-base64 interfaces package.

This package provides protocol definitions for codecs and for the token
encoders built on them.
"""

from .encoding import IByteCodec, ITokenEncoder

__all__ = [
    "IByteCodec",
    "ITokenEncoder",
]
