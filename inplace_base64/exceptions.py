"""Exception classes for inplace-base64.

This module defines the exception types raised when a caller breaks the buffer
contract of the codec. Malformed Base64 text never raises.
"""


class Base64Error(Exception):
    """Base exception class for all inplace-base64 errors."""

    pass


class BufferTooSmallError(Base64Error):
    """Exception raised when an output buffer cannot hold the result."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"output buffer too small: need {required} bytes, have {available}"
        )
        self.required = required
        self.available = available


class InvalidLengthError(Base64Error):
    """Exception raised when a length is negative or exceeds the input."""

    pass


class ReadOnlyBufferError(Base64Error):
    """Exception raised when the buffer to write into is not writable."""

    pass
