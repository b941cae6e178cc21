"""Base64 encoder writing into caller-supplied buffers.

The encoder walks the input from its last byte to its first and fills the
output from its last position to its first. Because every group of three bytes
grows into four symbols written behind the read cursor, the output may be the
very same buffer as the input, provided it is large enough for the result.
"""

from __future__ import annotations

from typing import Any

from inplace_base64.alphabet import PADDING, Alphabet, split_group
from inplace_base64.buffers import resolve_length, source_view, target_view


def encoded_length(length: int) -> int:
    """Return the number of symbols produced for ``length`` input bytes."""
    return (length + 2) // 3 * 4


def encode(
    output: Any,
    data: Any,
    length: int | None = None,
    alphabet: Alphabet = Alphabet.STANDARD,
) -> int:
    """Encode ``data`` into ``output``.

    ``output`` may be ``data`` itself, in which case the buffer is rewritten in
    place. A partially overlapping view at a different offset is not supported
    and produces undefined output.

    Args:
        output: Writable buffer of at least ``encoded_length(length)`` bytes.
        data: The bytes to encode.
        length: Number of leading bytes of ``data`` to encode. Defaults to all.
        alphabet: The forward table to encode with.

    Returns:
        The number of symbols written, padding included. No terminator is
        written.

    Raises:
        InvalidLengthError: If ``length`` is negative or exceeds ``data``.
        ReadOnlyBufferError: If ``output`` is not writable.
        BufferTooSmallError: If ``output`` cannot hold the encoded text.

    Example:
        >>> buffer = bytearray(b"foo")
        >>> buffer.extend(bytes(1))
        >>> encode(buffer, buffer, 3)
        4
        >>> bytes(buffer)
        b'Zm9v'
    """
    with source_view(data) as source:
        length = resolve_length(source, length)
        size = encoded_length(length)
        with target_view(output, size) as target:
            _encode_backward(target, source, length, alphabet.symbols)
    return size


def encode_standard(output: Any, data: Any, length: int | None = None) -> int:
    """Encode with the standard ``+/`` alphabet. See :func:`encode`."""
    return encode(output, data, length, Alphabet.STANDARD)


def encode_url_safe(output: Any, data: Any, length: int | None = None) -> int:
    """Encode with the URL-safe ``-_`` alphabet. See :func:`encode`."""
    return encode(output, data, length, Alphabet.URL_SAFE)


def _encode_backward(
    target: memoryview, source: memoryview, length: int, symbols: bytes
) -> None:
    reader = length
    writer = encoded_length(length)

    tail = length % 3
    if tail:
        reader -= tail
        writer -= 4
        second = source[reader + 1] if tail == 2 else 0
        first = source[reader]
        s0, s1, s2, _ = split_group(first, second, 0)
        target[writer] = symbols[s0]
        target[writer + 1] = symbols[s1]
        target[writer + 2] = symbols[s2] if tail == 2 else PADDING
        target[writer + 3] = PADDING

    while reader:
        reader -= 3
        writer -= 4
        s0, s1, s2, s3 = split_group(
            source[reader], source[reader + 1], source[reader + 2]
        )
        target[writer + 3] = symbols[s3]
        target[writer + 2] = symbols[s2]
        target[writer + 1] = symbols[s1]
        target[writer] = symbols[s0]
