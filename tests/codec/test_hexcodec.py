"""Strict hex decoding and SHA-256 helper tests."""

import pytest

from rippled_binary_codec.codec.hashes import checksum4, double_sha256, sha256_bytes
from rippled_binary_codec.codec.hexcodec import decode_hex, encode_hex
from rippled_binary_codec.runtime.errors import (
    HexError, InvalidDigitError, OddLengthError, TypeMismatchError
)


@pytest.mark.unit
class TestDecodeHex:

    @pytest.mark.parametrize("value,expected", [
        ("", b""),
        ("00", b"\x00"),
        ("DeadBeef", b"\xde\xad\xbe\xef"),
        ("7274312E312E31", b"rt1.1.1"),
    ])
    def test_valid(self, value, expected):
        assert decode_hex(value) == expected

    def test_odd_length(self):
        with pytest.raises(OddLengthError):
            decode_hex("ABC")

    @pytest.mark.parametrize("value", ["zz", "0x00", "AB CD", "12\n", "١٢"])
    def test_invalid_digit(self, value):
        with pytest.raises(InvalidDigitError):
            decode_hex(value)

    def test_errors_share_base(self):
        assert issubclass(OddLengthError, HexError)
        assert issubclass(InvalidDigitError, HexError)

    @pytest.mark.parametrize("value", [None, 12, b"00"])
    def test_not_a_string(self, value):
        with pytest.raises(TypeMismatchError):
            decode_hex(value)

    def test_encode_is_upper_case(self):
        assert encode_hex(b"\xab\x01") == "AB01"


@pytest.mark.unit
class TestHashes:

    def test_sha256_empty(self):
        assert sha256_bytes(b"").hex() == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_double_sha256_is_sha256_twice(self):
        assert double_sha256(b"abc") == sha256_bytes(sha256_bytes(b"abc"))

    def test_checksum4_length(self):
        assert len(checksum4(b"\x00" * 21)) == 4

    def test_double_sha256_rejects_str(self):
        with pytest.raises(ValueError):
            double_sha256("abc")
