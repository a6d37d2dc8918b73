"""Shared test fixtures for rfc4291."""

import random

import pytest

from rfc4291 import IPv6Address


REPRESENTATIVE = [
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0),
    (0x2001, 0x0db8, 0, 0, 0, 0, 0, 1),
    (0x2001, 0x0db8, 0x85a3, 0, 0, 0x8a2e, 0x0370, 0x7334),
    (0x2001, 0, 0, 0x5678, 0x9abc, 0, 0, 0x2222),
    (0x2001, 0x0db8, 0, 0x5678, 0x9abc, 0xdef0, 0x1111, 0x2222),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (0, 0, 1, 0, 0, 0, 1, 0),
    (0xfe80, 0, 0, 0, 0x0202, 0xb3ff, 0xfe1e, 0x8329),
    (0xff02, 0, 0, 0, 0, 0, 0, 0x1),
    (0xffff, 0xffff, 0xffff, 0xffff, 0xffff, 0xffff, 0xffff, 0xffff),
]


@pytest.fixture
def representative_addresses():
    """Hand-picked addresses covering every compression shape."""
    return [IPv6Address(*segments) for segments in REPRESENTATIVE]


@pytest.fixture
def random_addresses():
    """A seeded sample of addresses, biased towards zero segments."""
    rng = random.Random(4291)
    result = []
    for _ in range(500):
        segments = [
            0 if rng.random() < 0.5 else rng.randrange(0x10000)
            for _ in range(8)
        ]
        result.append(IPv6Address(*segments))
    return result
