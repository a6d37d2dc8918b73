"""Structured (JSON) encoding of IPv6 addresses.

An address is represented by its canonical text string. Decoding parses
that string; a parse failure surfaces as DecodeError, with the original
ParseError attached as __cause__.
"""

from __future__ import annotations

import json
from typing import Any

from rfc4291.address import IPv6Address
from rfc4291.errors import ParseError


class DecodeError(ValueError):
    """A structured value that does not hold a valid IPv6 address.

    Attributes:
        path: Keys and indexes leading to the bad value, outermost first.
    """

    def __init__(self, message: str, path: tuple[str | int, ...] = ()) -> None:
        loc = "".join(f"[{p!r}]" for p in path)
        super().__init__(f"{message} at {loc}" if loc else message)
        self.path = path


def encode(address: IPv6Address) -> str:
    """Return the structured representation of address.

    >>> encode(IPv6Address(0xfe80, 0, 0, 0, 0, 0, 0, 1))
    'fe80::1'
    """
    return str(address)


def decode(value: Any, path: tuple[str | int, ...] = ()) -> IPv6Address:
    """Decode a structured value produced by encode().

    Raises:
        DecodeError: If value is not a string or does not parse.
    """
    if not isinstance(value, str):
        raise DecodeError(f"Expected IPv6 address string, got {type(value).__name__}", path)
    try:
        return IPv6Address.parse(value)
    except ParseError as e:
        raise DecodeError(f"Invalid IPv6 address: {e}", path) from e


class AddressEncoder(json.JSONEncoder):
    """JSON encoder that writes IPv6Address values as canonical strings.

    >>> json.dumps({"gw": IPv6Address.parse("2001:DB8::1")}, cls=AddressEncoder)
    '{"gw": "2001:db8::1"}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, IPv6Address):
            return encode(o)
        return super().default(o)
