"""Binary codec for uuidbytes.

This module converts identifiers to and from their 16-byte big-endian form.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
]
