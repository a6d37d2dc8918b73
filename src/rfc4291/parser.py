"""IPv6 text parser (RFC 4291 section 2.2).

Accepts every legal textual form: the full eight-group form, a single
'::' compression anywhere, one to four hex digits per group, and hex
digits in either case. Everything else raises a specific ParseError
subclass from rfc4291.errors.

Parsing is two-pass. The first pass walks the colon runs to find the
compression point and reject misplaced colons. The second pass parses
the explicit groups either side of it; only then is the number of zero
groups to insert known.
"""

from __future__ import annotations

from rfc4291.errors import (
    EmptyAddressError,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidSegmentError,
    MultipleCompressionsError,
    TooFewSegmentsError,
    TooManySegmentsError,
)

SEGMENT_COUNT = 8
MAX_SEGMENT_DIGITS = 4

COLON = ord(":")

_HEX_VALUES = {b: int(chr(b), 16) for b in b"0123456789abcdefABCDEF"}


def _as_bytes(text: str | bytes | bytearray | memoryview) -> tuple[bytes, str]:
    """Return (raw bytes, display text) for any supported input type."""
    if isinstance(text, str):
        return text.encode("utf-8", errors="surrogateescape"), text
    data = bytes(text)
    return data, data.decode("utf-8", errors="replace")


def find_compression(data: bytes, value: str) -> int | None:
    """Locate the '::' marker in data.

    Returns the byte offset of the marker, or None when the address is
    uncompressed.

    >>> find_compression(b"2001:db8::1", "2001:db8::1")
    8
    >>> find_compression(b"1:2:3:4:5:6:7:8", "1:2:3:4:5:6:7:8") is None
    True

    Raises:
        MultipleCompressionsError: If '::' occurs more than once.
        InvalidFormatError: For ':::' or a lone ':' at either end.
    """
    compression = None
    end = len(data)
    i = 0
    while i < end:
        if data[i] != COLON:
            i += 1
            continue
        run_start = i
        while i < end and data[i] == COLON:
            i += 1
        run = i - run_start
        if run > 2:
            raise InvalidFormatError(value)
        if run == 2:
            if compression is not None:
                raise MultipleCompressionsError(value)
            compression = run_start
        elif run_start == 0 or i == end:
            raise InvalidFormatError(value)
    return compression


def parse_segment(part: bytes, value: str) -> int:
    """Parse one group of 1-4 hex digits into a 16-bit integer.

    >>> parse_segment(b"0DB8", "2001:0DB8::1")
    3512
    """
    if len(part) > MAX_SEGMENT_DIGITS:
        raise InvalidSegmentError(value, part.decode("utf-8", errors="replace"))
    result = 0
    for byte in part:
        digit = _HEX_VALUES.get(byte)
        if digit is None:
            raise InvalidCharacterError(value, byte)
        result = result * 16 + digit
    return result


def _split_groups(chunk: bytes) -> list[bytes]:
    # find_compression() has already rejected empty groups here
    return chunk.split(b":") if chunk else []


def parse_segments(text: str | bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Parse IPv6 text into eight 16-bit segments, most significant first.

    >>> parse_segments("2001:db8::1")
    (8193, 3512, 0, 0, 0, 0, 0, 1)
    >>> parse_segments(b"::")
    (0, 0, 0, 0, 0, 0, 0, 0)

    Raises:
        ParseError: One of its subclasses, naming the exact problem.
    """
    data, value = _as_bytes(text)
    if not data:
        raise EmptyAddressError()

    compression = find_compression(data, value)

    if compression is None:
        head, tail = data.split(b":"), []
    else:
        head = _split_groups(data[:compression])
        tail = _split_groups(data[compression + 2:])

    before = [parse_segment(part, value) for part in head]
    after = [parse_segment(part, value) for part in tail]

    if compression is not None:
        missing = SEGMENT_COUNT - len(before) - len(after)
        if missing < 0:
            raise TooManySegmentsError(value)
        before.extend([0] * missing)

    segments = before + after
    if len(segments) < SEGMENT_COUNT:
        raise TooFewSegmentsError(value)
    if len(segments) > SEGMENT_COUNT:
        raise TooManySegmentsError(value)
    return tuple(segments)
