"""Identifier value type.

A UUID is modelled as its two signed 64-bit halves, the layout used by the
16-byte big-endian wire form.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field

from ..utils.twos import INT64_MAX, INT64_MIN, to_signed64, to_unsigned64


class UuidHalves(BaseModel):
    """A 128-bit identifier split into most- and least-significant halves.

    Both halves are signed 64-bit integers. Instances are immutable and
    hashable, so they can be used as dictionary keys.

    Example:
        >>> ident = UuidHalves(most_significant=1, least_significant=-1)
        >>> ident.to_int() == (1 << 64) | 0xFFFFFFFFFFFFFFFF
        True
    """

    model_config = ConfigDict(
        # Reject bools and numeric strings
        strict=True,
        frozen=True,
        extra="forbid",
    )

    most_significant: int = Field(ge=INT64_MIN, le=INT64_MAX)
    least_significant: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @classmethod
    def from_int(cls, value: int) -> UuidHalves:
        """Build an identifier from its unsigned 128-bit integer form.

        Raises:
            ValueError: If value is not an unsigned 128-bit integer
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << 128):
            raise ValueError(f"Value {value} is outside the unsigned 128-bit range")

        return cls(
            most_significant=to_signed64(value >> 64),
            least_significant=to_signed64(value & ((1 << 64) - 1)),
        )

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> UuidHalves:
        return cls.from_int(value.int)

    def to_int(self) -> int:
        """Return the unsigned 128-bit integer form."""
        return (to_unsigned64(self.most_significant) << 64) | to_unsigned64(
            self.least_significant
        )

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self.to_int())

    def __str__(self) -> str:
        return str(self.to_uuid())
