"""Identifier model for uuidbytes."""

from __future__ import annotations

from .identifier import UuidHalves

__all__ = ["UuidHalves"]
