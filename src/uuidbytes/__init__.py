"""uuidbytes: 16-byte UUID codec

Converts 128-bit identifiers to and from their 16-byte big-endian binary
form, the compact layout used to store UUIDs in binary record fields.

Key Features:
- Identifiers as two signed 64-bit halves (pydantic-validated)
- Interchange with the standard library ``uuid.UUID``
- Strict length checking on decode

Quick Start:
    >>> from uuidbytes import UuidHalves, encode, decode
    >>>
    >>> ident = UuidHalves(
    ...     most_significant=0x0102030405060708,
    ...     least_significant=0x0910111213141516,
    ... )
    >>> data = encode(ident)
    >>> data.hex()
    '01020304050607080910111213141516'
    >>> decode(data) == ident
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import decode, encode
from .exceptions import DecodeError, EncodeError, UuidBytesError
from .models import UuidHalves
from .utils import to_signed64, to_unsigned64

__all__ = [
    # Core API
    "UuidHalves",
    "encode",
    "decode",
    # Exceptions
    "UuidBytesError",
    "EncodeError",
    "DecodeError",
    # Two's complement helpers
    "to_signed64",
    "to_unsigned64",
    # Version
    "__version__",
]
