"""Tests for the structured (JSON) adapter."""

import json

import pytest

from rfc4291 import IPv6Address, ParseError
from rfc4291.errors import InvalidCharacterError, MultipleCompressionsError
from rfc4291.structured import AddressEncoder, DecodeError, decode, encode


class TestEncode:
    def test_canonical_string(self):
        assert encode(IPv6Address(0x2001, 0x0db8, 0, 0, 0, 0, 0, 1)) == "2001:db8::1"

    def test_json_encoder(self):
        data = {"dns": [IPv6Address.parse("2001:4860:4860::8888"), IPv6Address.parse("::1")]}
        assert json.loads(json.dumps(data, cls=AddressEncoder)) == {
            "dns": ["2001:4860:4860::8888", "::1"],
        }

    def test_json_encoder_other_types_fail(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=AddressEncoder)


class TestDecode:
    def test_valid(self):
        assert decode("FE80::1") == IPv6Address.parse("fe80::1")

    def test_round_trip(self, representative_addresses):
        for addr in representative_addresses:
            assert decode(json.loads(json.dumps(encode(addr)))) == addr

    def test_wraps_parse_error(self):
        with pytest.raises(DecodeError) as excinfo:
            decode("gggg::1")
        assert isinstance(excinfo.value.__cause__, InvalidCharacterError)
        assert isinstance(excinfo.value.__cause__, ParseError)

    def test_message_includes_cause(self):
        with pytest.raises(DecodeError, match="Multiple :: compressions"):
            decode("1::2::3")

    def test_path(self):
        with pytest.raises(DecodeError) as excinfo:
            decode("1::2::3", path=("interfaces", 0, "address"))
        assert excinfo.value.path == ("interfaces", 0, "address")
        assert "['interfaces'][0]['address']" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, MultipleCompressionsError)

    def test_non_string(self):
        with pytest.raises(DecodeError, match="got int"):
            decode(42)
        with pytest.raises(DecodeError, match="got NoneType"):
            decode(None)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode("")
