#!/usr/bin/env python3
"""Basic usage example for uuidbytes.

This example demonstrates:
1. Encoding a UUID to its 16-byte form
2. Decoding the bytes back to signed 64-bit halves
3. Decoding a signed-byte buffer as stored by other runtimes
"""

from __future__ import annotations

import uuid

from uuidbytes import DecodeError, decode, encode


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("uuidbytes Basic Usage Example")
    print("=" * 60)
    print()

    value = uuid.UUID("f81d4fae-7dec-11d0-a765-00a0c91e6bf6")
    print(f"1. Encoding {value}...")
    data = encode(value)
    print(f"   {len(data)} bytes: {data.hex()}")
    print()

    print("2. Decoding back to halves...")
    ident = decode(data)
    print(f"   msb={ident.most_significant}")
    print(f"   lsb={ident.least_significant}")
    print(f"   uuid={ident}")
    print()

    print("3. Decoding signed bytes...")
    signed = [b - 256 if b > 127 else b for b in data]
    assert decode(signed) == ident
    print(f"   {signed[:4]}... -> {decode(signed)}")
    print()

    print("4. Length is checked...")
    try:
        decode(data[:15])
    except DecodeError as e:
        print(f"   DecodeError: {e}")


if __name__ == "__main__":
    main()
