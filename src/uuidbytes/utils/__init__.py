"""Utility functions for uuidbytes."""

from __future__ import annotations

from .twos import (
    HALF_BYTES,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    UUID_BYTES,
    to_signed64,
    to_unsigned64,
)

__all__ = [
    "HALF_BYTES",
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    "UUID_BYTES",
    "to_signed64",
    "to_unsigned64",
]
