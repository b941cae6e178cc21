"""inplace-base64: a buffer-oriented Base64 codec.

This package encodes bytes to Base64 text and back inside caller-supplied
buffers, optionally in place, with a decoder that skips foreign bytes instead
of rejecting them.

Main Components:
    - encode / encode_standard / encode_url_safe: buffer encoder
    - decode: tolerant buffer decoder
    - encoded_length / decoded_capacity: buffer sizing
    - Base64, Base64Codec, Base64Config: allocating helpers
    - Interfaces: Protocol definitions for codec consumers

Example:
    >>> from inplace_base64 import Base64
    >>> Base64.encode(b"foobar")
    'Zm9vYmFy'
"""

from inplace_base64.alphabet import Alphabet
from inplace_base64.codec import Base64, Base64Codec, Base64Config
from inplace_base64.decoder import decode, decoded_capacity
from inplace_base64.encoder import (
    encode,
    encode_standard,
    encode_url_safe,
    encoded_length,
)
from inplace_base64.exceptions import (
    Base64Error,
    BufferTooSmallError,
    InvalidLengthError,
    ReadOnlyBufferError,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "Alphabet",
    "encode",
    "encode_standard",
    "encode_url_safe",
    "encoded_length",
    "decode",
    "decoded_capacity",
    "Base64",
    "Base64Codec",
    "Base64Config",
    # Exceptions
    "Base64Error",
    "BufferTooSmallError",
    "InvalidLengthError",
    "ReadOnlyBufferError",
]
