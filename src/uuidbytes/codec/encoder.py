"""Binary encoder for 16-byte UUIDs.

This module provides the encode() function that converts an identifier to its
big-endian 16-byte form, the same layout as ``uuid.UUID.bytes``.
"""

from __future__ import annotations

import uuid
from typing import Union

from ..exceptions import EncodeError
from ..models.identifier import UuidHalves
from ..utils.twos import HALF_BYTES, UUID_BYTES


def _write_half(buffer: bytearray, start: int, half: int) -> None:
    # Lowest byte is peeled off first and lands at the highest index
    for i in range(start + HALF_BYTES - 1, start - 1, -1):
        buffer[i] = half & 0xFF
        half >>= 8


def encode(identifier: Union[UuidHalves, uuid.UUID]) -> bytes:
    """Encode an identifier to 16 big-endian bytes.

    Args:
        identifier: Identifier halves, or a standard library UUID

    Returns:
        New 16-byte buffer

    Raises:
        EncodeError: If identifier is neither UuidHalves nor uuid.UUID

    Example:
        >>> encode(UuidHalves(most_significant=0, least_significant=1))[-1]
        1
    """
    if isinstance(identifier, uuid.UUID):
        identifier = UuidHalves.from_uuid(identifier)
    elif not isinstance(identifier, UuidHalves):
        raise EncodeError(
            f"encode() requires UuidHalves or uuid.UUID, got {type(identifier).__name__}"
        )

    buffer = bytearray(UUID_BYTES)
    _write_half(buffer, 0, identifier.most_significant)
    _write_half(buffer, HALF_BYTES, identifier.least_significant)

    return bytes(buffer)
