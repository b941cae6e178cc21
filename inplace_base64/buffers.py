"""Buffer validation shared by the encoder and decoder.

Every check here runs once per call, before any byte is written.
"""

from __future__ import annotations

from typing import Any

from inplace_base64.exceptions import (
    BufferTooSmallError,
    InvalidLengthError,
    ReadOnlyBufferError,
)


def source_view(data: Any) -> memoryview:
    """Return a flat byte view over a bytes-like object."""
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def target_view(output: Any, required: int) -> memoryview:
    """Return a flat writable byte view holding at least ``required`` bytes.

    Args:
        output: The caller-owned buffer to write into.
        required: The number of bytes the operation will write.

    Returns:
        A writable byte view over ``output``.

    Raises:
        ReadOnlyBufferError: If ``output`` cannot be written to.
        BufferTooSmallError: If ``output`` is shorter than ``required``.
    """
    view = source_view(output)
    if view.readonly:
        view.release()
        raise ReadOnlyBufferError(
            f"cannot write into read-only {type(output).__name__!r} buffer"
        )
    if len(view) < required:
        available = len(view)
        view.release()
        raise BufferTooSmallError(required, available)
    return view


def resolve_length(view: memoryview, length: int | None) -> int:
    """Validate an explicit length against the input, defaulting to all of it.

    Raises:
        InvalidLengthError: If ``length`` is negative or longer than the input.
    """
    if length is None:
        return len(view)
    if length < 0 or length > len(view):
        raise InvalidLengthError(
            f"length {length} outside input of {len(view)} bytes"
        )
    return length
