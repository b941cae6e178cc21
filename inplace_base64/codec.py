"""Allocating Base64 helpers.

This module wraps the buffer encoder and decoder for callers that just want a
``str`` out of ``bytes`` and back, sizing the buffers for them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from inplace_base64.alphabet import Alphabet
from inplace_base64.decoder import decode, decoded_capacity
from inplace_base64.encoder import encode, encoded_length
from inplace_base64.interfaces.encoding import IByteCodec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Base64Config:
    """Configuration for a Base64Codec.

    Attributes:
        alphabet: Forward table used when encoding.
        padding: Whether encoded text keeps its trailing ``=`` characters.
    """

    alphabet: Alphabet = Alphabet.STANDARD
    padding: bool = True


class Base64Codec(IByteCodec):
    """Base64 codec producing and consuming text.

    Decoding is tolerant whatever the configuration: both alphabets are
    accepted, padding is optional and foreign characters are skipped.
    """

    def __init__(self, config: Base64Config | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Alphabet and padding settings. Defaults to standard, padded.
        """
        self.config = config or Base64Config()

    def encode(self, data: bytes) -> str:
        """Encode bytes to Base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text, without ``=`` if padding is disabled.
        """
        buffer = bytearray(encoded_length(len(data)))
        written = encode(buffer, data, len(data), self.config.alphabet)
        text = buffer[:written].decode("ascii")
        if not self.config.padding:
            stripped = text.rstrip("=")
            if len(stripped) != len(text):
                logger.debug("stripped %d padding characters", len(text) - len(stripped))
            text = stripped
        return text

    def decode(self, text: str | bytes) -> bytes:
        """Decode Base64 text to bytes.

        Args:
            text: The text to decode. A ``str`` is UTF-8 encoded first, so any
                non-ASCII character is skipped like other foreign bytes.

        Returns:
            The decoded bytes.
        """
        encoded = text.encode("utf-8") if isinstance(text, str) else text
        buffer = bytearray(decoded_capacity(len(encoded)))
        written = decode(buffer, encoded, len(encoded))
        return bytes(buffer[:written])


_STANDARD = Base64Codec()
_URL_SAFE = Base64Codec(Base64Config(alphabet=Alphabet.URL_SAFE))
_URL_SAFE_UNPADDED = Base64Codec(Base64Config(alphabet=Alphabet.URL_SAFE, padding=False))


class Base64:
    """Base64 encoding utilities.

    Static shortcuts over the three common Base64Codec configurations.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to standard, padded Base64 text."""
        return _STANDARD.encode(data)

    @staticmethod
    def encode_url(data: bytes, padding: bool = True) -> str:
        """Encode bytes to URL-safe Base64 text (RFC 4648 Section 5).

        Args:
            data: The bytes to encode.
            padding: Whether to keep trailing ``=`` characters.

        Returns:
            A URL-safe Base64 string.
        """
        codec = _URL_SAFE if padding else _URL_SAFE_UNPADDED
        return codec.encode(data)

    @staticmethod
    def decode(text: str | bytes) -> bytes:
        """Decode standard or URL-safe Base64 text, padded or not."""
        return _STANDARD.decode(text)
