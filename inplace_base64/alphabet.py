"""Base64 alphabet tables.

This module holds the two forward tables (sextet to symbol), the shared
backward table (byte to sextet) and the bit helpers that split three bytes into
four sextets and join them back. All tables are immutable ``bytes`` built once
at import time and are safe to share between threads.
"""

from __future__ import annotations

from enum import Enum

PADDING = ord("=")

STANDARD_SYMBOLS = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
)
URL_SAFE_SYMBOLS = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_="
)

# Backward table values outside the 0..63 sextet range
PADDING_VALUE = 64
UNKNOWN = 255


def _build_decode_table() -> bytes:
    """Build the backward table recognizing both alphabets.

    ``+``/``-`` and ``/``/``_`` share the sextets 62 and 63 and collide with
    nothing else, so a single table serves both alphabets.

    Returns:
        A 256-byte table indexed by byte value.
    """
    table = bytearray([UNKNOWN]) * 256
    for symbols in (STANDARD_SYMBOLS, URL_SAFE_SYMBOLS):
        for value, symbol in enumerate(symbols):
            table[symbol] = value
    return bytes(table)


DECODE_TABLE = _build_decode_table()


class Alphabet(Enum):
    """Selects the forward table used when encoding."""

    STANDARD = "standard"
    URL_SAFE = "url_safe"

    @property
    def symbols(self) -> bytes:
        """The 65-entry forward table (64 symbols plus ``=``)."""
        if self is Alphabet.URL_SAFE:
            return URL_SAFE_SYMBOLS
        return STANDARD_SYMBOLS


def split_group(first: int, second: int, third: int) -> tuple[int, int, int, int]:
    """Split three bytes into four sextets."""
    return (
        first >> 2,
        ((first & 3) << 4) | (second >> 4),
        ((second & 15) << 2) | (third >> 6),
        third & 63,
    )


def join_group(first: int, second: int, third: int, fourth: int) -> tuple[int, int, int]:
    """Join four sextets back into three bytes."""
    return (
        ((first << 2) | (second >> 4)) & 0xFF,
        ((second << 4) | (third >> 2)) & 0xFF,
        ((third << 6) | fourth) & 0xFF,
    )
