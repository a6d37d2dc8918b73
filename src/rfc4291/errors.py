"""Error types raised when decoding IPv6 addresses.

Text parsing failures form a closed hierarchy under ParseError, one
subclass per failure mode. Each carries the full original input so a
caller can render a diagnostic without re-deriving context. Binary
decoding has its own BinaryLengthError.

All of these derive from ValueError.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for IPv6 text parsing failures.

    Attributes:
        value: The complete original input, decoded as text.
        code: Machine-readable failure code (e.g. 'invalid_character').
    """

    code = "parse_error"

    def __init__(self, value: str, message: str) -> None:
        super().__init__(message)
        self.value = value


class EmptyAddressError(ParseError):
    """The input had zero length."""

    code = "empty"

    def __init__(self) -> None:
        super().__init__("", "IPv6 address cannot be empty")


class InvalidCharacterError(ParseError):
    """A byte that is neither a hex digit nor a colon.

    Attributes:
        byte: The offending byte value.
    """

    code = "invalid_character"

    def __init__(self, value: str, byte: int) -> None:
        super().__init__(value, f"Invalid byte 0x{byte:x} in IPv6 address {value!r}")
        self.byte = byte


class InvalidSegmentError(ParseError):
    """A colon-delimited group longer than four characters.

    Attributes:
        segment: The text of the offending group.
    """

    code = "invalid_segment"

    def __init__(self, value: str, segment: str) -> None:
        super().__init__(value, f"Invalid segment in IPv6 address: {segment!r}")
        self.segment = segment


class MultipleCompressionsError(ParseError):
    code = "multiple_compressions"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Multiple :: compressions in IPv6 address: {value!r}")


class TooFewSegmentsError(ParseError):
    code = "too_few_segments"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Too few segments in IPv6 address: {value!r}")


class TooManySegmentsError(ParseError):
    code = "too_many_segments"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Too many segments in IPv6 address: {value!r}")


class InvalidFormatError(ParseError):
    """Colons in a position no grammar rule allows.

    Covers a lone ':' at either end of the input and runs of three or
    more colons.
    """

    code = "invalid_format"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Invalid IPv6 address format: {value!r}")


class BinaryLengthError(ValueError):
    """A binary address buffer of the wrong size.

    Attributes:
        expected: Required number of bytes.
        actual: Number of bytes supplied.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"IPv6 address must be {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual
