"""64-bit two's complement helpers.

Identifier halves are stored as signed 64-bit integers, while the byte
accumulators in the codec work on unsigned values. These helpers convert
between the two views of the same bit pattern.
"""

from __future__ import annotations

UUID_BYTES = 16
HALF_BYTES = 8

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def to_signed64(value: int) -> int:
    """Reinterpret an unsigned 64-bit value as signed.

    Args:
        value: Unsigned integer (0 to 2**64 - 1)

    Returns:
        Signed integer with the same bit pattern

    Raises:
        ValueError: If value is outside the unsigned 64-bit range

    Example:
        >>> to_signed64(0xFFFFFFFFFFFFFFFF)
        -1
    """
    if value < 0 or value > UINT64_MAX:
        raise ValueError(f"Value {value} is outside the unsigned 64-bit range")

    # Check sign bit (MSB)
    if value & (1 << 63):
        return value - (1 << 64)
    return value


def to_unsigned64(value: int) -> int:
    """Reinterpret a signed 64-bit value as unsigned.

    Args:
        value: Signed integer (-2**63 to 2**63 - 1)

    Returns:
        Unsigned integer with the same bit pattern

    Raises:
        ValueError: If value is outside the signed 64-bit range
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(
            f"Value {value} doesn't fit in 64 bits (range: {INT64_MIN} to {INT64_MAX})"
        )

    return value & UINT64_MAX
