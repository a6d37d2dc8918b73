"""RFC 4291 / RFC 5952 IPv6 addresses — pure-Python implementation.

The IPv6Address value type with its three transformations: parsing
ASCII text, canonical RFC 5952 text serialization, and the 16-byte
network-order binary form.

Quick start:
    from rfc4291 import IPv6Address

    addr = IPv6Address.parse("2001:0DB8:0000::0001")
    print(addr)             # 2001:db8::1
    addr.to_bytes()         # 16 bytes, big-endian
"""

from rfc4291.address import (
    LOOPBACK,
    UNSPECIFIED,
    IPv6Address,
    format_address,
    pack_address,
    parse_address,
    unpack_address,
)
from rfc4291.errors import (
    BinaryLengthError,
    EmptyAddressError,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidSegmentError,
    MultipleCompressionsError,
    ParseError,
    TooFewSegmentsError,
    TooManySegmentsError,
)
from rfc4291.structured import AddressEncoder, DecodeError

__version__ = "0.1.0"

__all__ = [
    "AddressEncoder",
    "BinaryLengthError",
    "DecodeError",
    "EmptyAddressError",
    "IPv6Address",
    "InvalidCharacterError",
    "InvalidFormatError",
    "InvalidSegmentError",
    "LOOPBACK",
    "MultipleCompressionsError",
    "ParseError",
    "TooFewSegmentsError",
    "TooManySegmentsError",
    "UNSPECIFIED",
    "format_address",
    "pack_address",
    "parse_address",
    "unpack_address",
]
