"""Qualified Base64 text.

Binary values are published as URL-safe Base64 whose
first characters are replaced by a type code. The raw bytes are left-padded
with zero bytes so that the padding turns into whole leading ``A`` symbols,
which the code then overwrites.
"""

from inplace_base64 import decode, decoded_capacity, encode_url_safe, encoded_length


def qualify(code: str, raw: bytes, lead: int) -> str:
    """Encode raw bytes behind a type code.

    The zero-padded bytes are written into a buffer sized for the encoded text
    and encoded in place.

    Args:
        code: The type code replacing the leading characters.
        raw: The bytes to encode.
        lead: Number of zero bytes prepended before encoding.

    Returns:
        The qualified text, without padding.

    Raises:
        ValueError: If the code does not fit in the characters the lead bytes
            free up.
    """
    if len(code) > lead * 8 // 6:
        raise ValueError(f"code {code!r} too long for {lead} lead bytes")

    length = lead + len(raw)
    buffer = bytearray(encoded_length(length))
    buffer[lead:length] = raw
    written = encode_url_safe(buffer, buffer, length)

    text = buffer[:written].decode("ascii").rstrip("=")
    return code + text[len(code):]


def unqualify(code: str, text: str, lead: int) -> bytes:
    """Decode qualified text back into its raw bytes.

    Args:
        code: The expected type code.
        text: The qualified text.
        lead: Number of zero bytes prepended when encoding.

    Returns:
        The raw bytes.

    Raises:
        ValueError: If the text does not start with the code.
    """
    if not text.startswith(code):
        raise ValueError(f"expected {code!r} prefix")

    encoded = ("A" * len(code) + text[len(code):]).encode("ascii")
    buffer = bytearray(decoded_capacity(len(encoded)))
    written = decode(buffer, encoded)
    return bytes(buffer[lead:written])
