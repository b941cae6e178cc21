"""Encoding interfaces for inplace-base64.

This module defines protocols for byte/text codecs and for the token encoders
that sit on top of them.
"""

from __future__ import annotations

from typing import Protocol


class IByteCodec(Protocol):
    """Interface for codecs turning bytes into text and back."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str | bytes) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.
        """
        ...


class ITokenEncoder(Protocol):
    """Interface for token encoding and decoding operations."""

    def signature_length(self, token: str) -> int:
        """Return the length of the signature prefixing a serialized token.

        Args:
            token: The serialized token.

        Returns:
            The number of leading characters holding the signature.
        """
        ...

    async def encode(self, object: str) -> str:
        """Encode an object string into a token.

        Args:
            object: The object string to encode.

        Returns:
            The encoded token.
        """
        ...

    async def decode(self, raw_token: str) -> str:
        """Decode a raw token into an object string.

        Args:
            raw_token: The raw token to decode.

        Returns:
            The decoded object string.
        """
        ...
