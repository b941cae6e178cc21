"""Tolerant Base64 decoder writing into caller-supplied buffers.

The decoder scans forward, skipping every byte that is neither a symbol of
either alphabet nor ``=``, and turns each run of four symbols into three bytes.
Malformed input never raises: whatever can be derived from the symbols seen is
written out. Since four symbols shrink into three bytes, the write cursor
always trails the read cursor and decoding may happen in place.
"""

from __future__ import annotations

import logging
from typing import Any

from inplace_base64.alphabet import DECODE_TABLE, PADDING_VALUE, UNKNOWN, join_group
from inplace_base64.buffers import resolve_length, source_view, target_view

logger = logging.getLogger(__name__)

# Bytes recovered from a trailing group holding 1, 2 or 3 symbols
_PARTIAL_GROUP_BYTES = {1: 1, 2: 1, 3: 2}


def decoded_capacity(length: int) -> int:
    """Return the output size required to decode ``length`` bytes of text.

    This covers the decoded bytes and the terminating zero byte.
    """
    return length // 4 * 3 + 3


def decode(output: Any, encoded: Any, length: int | None = None) -> int:
    """Decode Base64 text from ``encoded`` into ``output``.

    Both the standard and the URL-safe alphabet are recognized, even mixed in
    one input. A zero byte is written right after the decoded bytes; it is not
    included in the returned count.

    Args:
        output: Writable buffer of at least ``decoded_capacity(length)`` bytes,
            or ``None`` to decode in place into ``encoded``. In place, the
            terminating zero is only written when the buffer has room for it.
        encoded: The Base64 text to decode.
        length: Number of leading bytes of ``encoded`` to read. Defaults to all.

    Returns:
        The number of decoded bytes written.

    Raises:
        InvalidLengthError: If ``length`` is negative or exceeds ``encoded``.
        ReadOnlyBufferError: If the buffer to write into is not writable.
        BufferTooSmallError: If ``output`` is smaller than the decode capacity.

    Example:
        >>> text = bytearray(b"Zm9v\\nYmFy")
        >>> decode(None, text)
        6
        >>> bytes(text[:6])
        b'foobar'
    """
    with source_view(encoded) as source:
        length = resolve_length(source, length)
        if output is None:
            with target_view(encoded, 0) as target:
                written, skipped = _decode_forward(target, source, length)
                if written < len(target):
                    target[written] = 0
        else:
            with target_view(output, decoded_capacity(length)) as target:
                written, skipped = _decode_forward(target, source, length)
                target[written] = 0

    if skipped:
        logger.debug("skipped %d unrecognized bytes in %d bytes of input", skipped, length)
    return written


def _decode_forward(
    target: memoryview, source: memoryview, length: int
) -> tuple[int, int]:
    group = [0, 0, 0, 0]
    count = 0
    written = 0
    # bytes emitted by the most recent group, the only ones padding may retract
    emitted = 0
    padding = 0
    skipped = 0

    for index in range(length):
        value = DECODE_TABLE[source[index]]
        if value == UNKNOWN:
            skipped += 1
            continue
        padding = padding + 1 if value == PADDING_VALUE else 0
        group[count] = value & 63
        count += 1
        if count == 4:
            target[written : written + 3] = bytes(join_group(*group))
            written += 3
            emitted = 3
            count = 0

    if count:
        emitted = _finish_partial_group(target, written, group, count)
        written += emitted

    return written - min(padding, 2, emitted), skipped


def _finish_partial_group(
    target: memoryview, written: int, group: list[int], count: int
) -> int:
    """Write the bytes of a trailing group of fewer than four symbols.

    Returns:
        The number of bytes written.
    """
    sextets = group[:count] + [0] * (4 - count)
    octets = join_group(*sextets)[: _PARTIAL_GROUP_BYTES[count]]
    target[written : written + len(octets)] = bytes(octets)
    return len(octets)
