"""Token compression and encoding implementation.

This module provides token encoding/decoding with gzip compression and
unpadded URL-safe Base64.
"""

import gzip

from inplace_base64 import Alphabet, Base64Codec, Base64Config
from inplace_base64.interfaces import IByteCodec, ITokenEncoder


class TokenEncoder(ITokenEncoder):
    """Token encoder that compresses and encodes tokens.

    Encoding converts the string to UTF-8, compresses it with gzip at level 9
    and encodes the result as URL-safe Base64 without padding. Decoding reverses
    this; the tolerant decoder accepts the unpadded text as it is.

    Attributes:
        codec: The Base64 codec used for the text form.
    """

    # qualified "0I" prefix of a serialized token
    SIGNATURE_LENGTH = 88

    def __init__(self, codec: IByteCodec | None = None) -> None:
        """Initialize the encoder.

        Args:
            codec: Codec for the text form. Defaults to URL-safe, unpadded.
        """
        self.codec: IByteCodec = codec or Base64Codec(
            Base64Config(alphabet=Alphabet.URL_SAFE, padding=False)
        )

    def signature_length(self, token: str) -> int:
        """Return the length of the signature prefixing a serialized token.

        Raises:
            ValueError: If the token is shorter than a signature.
        """
        if len(token) < self.SIGNATURE_LENGTH:
            raise ValueError("token too short")
        return self.SIGNATURE_LENGTH

    async def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string.

        Example:
            >>> encoder = TokenEncoder()
            >>> token = await encoder.encode('{"user": "alice", "role": "admin"}')
            >>> "=" in token
            False
        """
        compressed = gzip.compress(object.encode("utf-8"), compresslevel=9)
        return self.codec.encode(compressed)

    async def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            gzip.BadGzipFile: If the token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        compressed = self.codec.decode(raw_token)
        return gzip.decompress(compressed).decode("utf-8")
