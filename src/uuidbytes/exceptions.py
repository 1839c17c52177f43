"""Exception hierarchy for uuidbytes.

All exceptions inherit from UuidBytesError for easy catching of any
uuidbytes-specific error.
"""

from __future__ import annotations


class UuidBytesError(Exception):
    """Base exception for all uuidbytes errors."""

    pass


class DecodeError(UuidBytesError, ValueError):
    """Raised when a byte buffer cannot be decoded into an identifier.

    Examples:
        - Buffer is not exactly 16 bytes long
        - Element is not an integer
        - Element is outside the signed or unsigned 8-bit range
    """

    pass


class EncodeError(UuidBytesError, TypeError):
    """Raised when encode() is given something that is not an identifier."""

    pass
