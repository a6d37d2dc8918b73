"""The IPv6 address value type (RFC 4291).

An address is an immutable 128-bit value held as eight unsigned 16-bit
segments, most significant first. Text and binary conversions live in
rfc4291.parser, rfc4291.serializer and rfc4291.binary; this module
binds them to the type and adds the address classifications of
RFC 4291 section 2.4.
"""

from __future__ import annotations

from dataclasses import dataclass

from rfc4291.binary import decode_segments, encode_segments
from rfc4291.errors import ParseError
from rfc4291.parser import SEGMENT_COUNT, parse_segments
from rfc4291.serializer import format_segments, format_segments_exploded

MAX_SEGMENT = 0xFFFF
MAX_ADDRESS = 2**128 - 1


@dataclass(frozen=True, order=True)
class IPv6Address:
    """A 128-bit IPv6 address.

    Equality, hashing and ordering follow the segment tuple, which
    orders addresses the same way as their 128-bit integer values.

    >>> addr = IPv6Address(0x2001, 0x0db8, 0, 0, 0, 0, 0, 1)
    >>> str(addr)
    '2001:db8::1'
    >>> addr == IPv6Address.parse('2001:0DB8:0:0::1')
    True
    """

    segments: tuple[int, int, int, int, int, int, int, int]

    def __init__(self, *segments: int) -> None:
        if len(segments) != SEGMENT_COUNT:
            raise ValueError(f"IPv6 address needs {SEGMENT_COUNT} segments, got {len(segments)}")
        for segment in segments:
            if isinstance(segment, bool) or not isinstance(segment, int):
                raise ValueError(f"Invalid IPv6 segment: {segment!r}")
            if not 0 <= segment <= MAX_SEGMENT:
                raise ValueError(f"IPv6 segment out of range: 0x{segment:x}")
        object.__setattr__(self, 'segments', tuple(segments))

    @classmethod
    def _from_segments(cls, segments: tuple[int, ...]) -> IPv6Address:
        """Build an address from segments already known to be valid."""
        address = object.__new__(cls)
        object.__setattr__(address, 'segments', segments)
        return address

    # -- construction ------------------------------------------------------

    @classmethod
    def parse(cls, text: str | bytes | bytearray | memoryview) -> IPv6Address:
        """Parse an address from ASCII text.

        >>> IPv6Address.parse('fe80::1').segments
        (65152, 0, 0, 0, 0, 0, 0, 1)

        Raises:
            ParseError: If text is not a valid IPv6 address.
        """
        return cls._from_segments(parse_segments(text))

    @classmethod
    def parse_or_none(cls, text: str | bytes | bytearray | memoryview) -> IPv6Address | None:
        """Parse an address, returning None instead of raising.

        >>> IPv6Address.parse_or_none('not-an-address') is None
        True
        """
        try:
            return cls.parse(text)
        except ParseError:
            return None

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> IPv6Address:
        """Decode the 16-byte network-order form.

        Raises:
            BinaryLengthError: If data is not exactly 16 bytes.
        """
        return cls._from_segments(decode_segments(data))

    @classmethod
    def from_int(cls, value: int) -> IPv6Address:
        """Create from a 128-bit unsigned integer.

        >>> IPv6Address.from_int(1)
        IPv6Address('::1')
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Invalid IPv6 integer: {value!r}")
        if not 0 <= value <= MAX_ADDRESS:
            raise ValueError(f"IPv6 integer out of range: {value}")
        return cls.from_bytes(value.to_bytes(16, 'big'))

    # -- conversion --------------------------------------------------------

    def to_ascii(self) -> bytes:
        """Canonical RFC 5952 text as ASCII bytes."""
        return str(self).encode('ascii')

    def to_bytes(self) -> bytes:
        """The 16-byte network-order form."""
        return encode_segments(self.segments)

    @property
    def packed(self) -> bytes:
        return self.to_bytes()

    @property
    def exploded(self) -> str:
        """Return the fully expanded address.

        >>> IPv6Address.parse('2404:e80:a137:110::124').exploded
        '2404:0e80:a137:0110:0000:0000:0000:0124'
        """
        return format_segments_exploded(self.segments)

    @property
    def reverse_pointer(self) -> str:
        """Reverse DNS name in ip6.arpa nibble format.

        >>> IPv6Address.parse('2001:db8::1').reverse_pointer
        '1.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.0.8.b.d.0.1.0.0.2.ip6.arpa'
        """
        nibbles = self.exploded.replace(':', '')
        return '.'.join(reversed(nibbles)) + '.ip6.arpa'

    def __int__(self) -> int:
        return int.from_bytes(self.to_bytes(), 'big')

    def __str__(self) -> str:
        return format_segments(self.segments)

    def __repr__(self) -> str:
        return f"IPv6Address('{self}')"

    def __reduce__(self):
        return self.__class__, self.segments

    # -- classification (RFC 4291 section 2.4) ------------------------------

    @property
    def is_unspecified(self) -> bool:
        """The all-zero address '::' (RFC 4291 section 2.5.2)."""
        return self == UNSPECIFIED

    @property
    def is_loopback(self) -> bool:
        """The address '::1' (RFC 4291 section 2.5.3)."""
        return self == LOOPBACK

    @property
    def is_multicast(self) -> bool:
        """In ff00::/8 (RFC 4291 section 2.7).

        >>> IPv6Address.parse('ff02::1').is_multicast
        True
        """
        return self.segments[0] & 0xFF00 == 0xFF00

    @property
    def is_link_local(self) -> bool:
        """In fe80::/10 (RFC 4291 section 2.5.6)."""
        return self.segments[0] & 0xFFC0 == 0xFE80

    @property
    def is_unique_local(self) -> bool:
        """In fc00::/7 (RFC 4193)."""
        return self.segments[0] & 0xFE00 == 0xFC00

    @property
    def is_global_unicast(self) -> bool:
        """Anything not unspecified, loopback, multicast, link-local or unique-local."""
        return not (
            self.is_unspecified
            or self.is_loopback
            or self.is_multicast
            or self.is_link_local
            or self.is_unique_local
        )


UNSPECIFIED = IPv6Address._from_segments((0, 0, 0, 0, 0, 0, 0, 0))
LOOPBACK = IPv6Address._from_segments((0, 0, 0, 0, 0, 0, 0, 1))


def parse_address(text: str | bytes | bytearray | memoryview) -> IPv6Address:
    """Parse IPv6 text into an address."""
    return IPv6Address.parse(text)


def format_address(address: IPv6Address) -> str:
    """Canonical RFC 5952 text of address."""
    return str(address)


def pack_address(address: IPv6Address) -> bytes:
    """16-byte network-order form of address."""
    return address.to_bytes()


def unpack_address(data: bytes | bytearray | memoryview) -> IPv6Address:
    """Decode a 16-byte network-order address."""
    return IPv6Address.from_bytes(data)
