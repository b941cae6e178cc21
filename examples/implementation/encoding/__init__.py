"""Encoding reference implementation package.

This package provides consumers of the codec: qualified text for binary
values and compressed tokens.
"""

from .qualified import qualify, unqualify
from .token_encoder import TokenEncoder

__all__ = [
    "qualify",
    "unqualify",
    "TokenEncoder",
]
