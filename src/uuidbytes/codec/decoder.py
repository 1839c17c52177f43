"""Binary decoder for 16-byte UUIDs.

This module provides the decode() function that converts a big-endian 16-byte
buffer back to an identifier.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from ..exceptions import DecodeError
from ..models.identifier import UuidHalves
from ..utils.twos import HALF_BYTES, UUID_BYTES, to_signed64

ByteInput = Union[bytes, bytearray, memoryview, Sequence[int]]


def _read_half(data: ByteInput, start: int) -> int:
    value = 0
    for i in range(start, start + HALF_BYTES):
        byte = data[i]
        if isinstance(byte, bool) or not isinstance(byte, int):
            raise DecodeError(f"Byte at index {i} must be an integer, got {type(byte).__name__}")
        if byte < -128 or byte > 255:
            raise DecodeError(f"Byte at index {i} is out of 8-bit range: {byte}")

        # Mask so signed byte values don't sign-extend into the accumulator
        value = (value << 8) | (byte & 0xFF)

    return to_signed64(value)


def decode(data: ByteInput) -> UuidHalves:
    """Decode a 16-byte big-endian buffer to an identifier.

    Bytes 0-7 form the most-significant half and bytes 8-15 the
    least-significant half. Integer sequences may hold unsigned (0..255)
    or signed (-128..127) byte values.

    Args:
        data: Exactly 16 bytes

    Returns:
        Decoded identifier

    Raises:
        DecodeError: If data is not 16 bytes long or holds a non-byte element

    Example:
        >>> decode(b"\\xff" * 16)
        UuidHalves(most_significant=-1, least_significant=-1)
    """
    try:
        length = len(data)
    except TypeError as e:
        raise DecodeError(f"Expected a byte sequence, got {type(data).__name__}") from e

    if length != UUID_BYTES:
        raise DecodeError(f"Invalid input length: expected {UUID_BYTES} bytes, got {length}")

    return UuidHalves(
        most_significant=_read_half(data, 0),
        least_significant=_read_half(data, HALF_BYTES),
    )
