"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from uuidbytes import UuidHalves


@pytest.fixture
def sequential_bytes() -> bytes:
    """Buffer whose bytes spell out 01..08 09 10..16 in hex."""
    return bytes.fromhex("01020304050607080910111213141516")


@pytest.fixture
def sequential_identifier() -> UuidHalves:
    """Identifier matching sequential_bytes."""
    return UuidHalves(
        most_significant=0x0102030405060708,
        least_significant=0x0910111213141516,
    )
