"""IPv6 binary encoding and decoding.

The binary form is exactly 16 bytes: the eight 16-bit segments written
big-endian (network byte order), segment 0 first. Every 16-byte buffer
is a valid address, so the only decoding failure is a wrong length.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from rfc4291.errors import BinaryLengthError

ADDRESS_SIZE = 16
ADDRESS_FORMAT = ">8H"


def encode_segments(segments: Sequence[int]) -> bytes:
    """Pack eight segments into 16 network-order bytes.

    >>> encode_segments([0x2001, 0x0db8, 0, 0, 0, 0, 0, 1]).hex()
    '20010db8000000000000000000000001'
    """
    return struct.pack(ADDRESS_FORMAT, *segments)


def decode_segments(data: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Unpack 16 network-order bytes into eight segments.

    Raises:
        BinaryLengthError: If data is not exactly 16 bytes.
    """
    # Count bytes, not items, for memoryviews of wider formats
    data = bytes(data)
    if len(data) != ADDRESS_SIZE:
        raise BinaryLengthError(ADDRESS_SIZE, len(data))
    return struct.unpack(ADDRESS_FORMAT, data)
