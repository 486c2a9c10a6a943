"""Error model tests: codes, formatting, serialization and field paths."""

import pytest

from rippled_binary_codec.runtime import errors
from rippled_binary_codec.runtime.errors import (
    AccountIdError, AmountError, BinaryCodecError, ErrorCode, HexError, IntegerOutOfRangeError,
    InvalidChecksumError, MalformedInputError, OddLengthError, ParseError, TypeMismatchError,
    UnknownEnumValueError
)


@pytest.mark.unit
class TestBinaryCodecError:

    def test_str_without_extras(self):
        assert str(BinaryCodecError("boom", ErrorCode.MALFORMED_INPUT)) == "[MALFORMED_INPUT] boom"

    def test_str_with_details_and_cause(self):
        error = BinaryCodecError("boom", ErrorCode.PARSE_ERROR, {"key": "Flags"}, ValueError("bad"))
        assert str(error) == "[PARSE_ERROR] boom | Details: {'key': 'Flags'} | Caused by: bad"

    def test_default_code(self):
        assert BinaryCodecError("boom").code == ErrorCode.UNKNOWN

    def test_to_dict(self):
        error = OddLengthError(details={"path": "Domain"}, cause=ValueError("x"))
        assert error.to_dict() == {
            "code": 301,
            "message": "Odd-length hex string",
            "details": {"path": "Domain"},
            "cause": "x",
        }

    def test_to_dict_minimal(self):
        assert MalformedInputError("no").to_dict() == {"code": 100, "message": "no"}

    def test_from_dict(self):
        error = BinaryCodecError.from_dict({"code": 503, "message": "bad", "details": {"path": "Fee"}})
        assert error.code == ErrorCode.INVALID_CURRENCY
        assert error.path == "Fee"

    def test_from_dict_defaults(self):
        error = BinaryCodecError.from_dict({})
        assert error.code == ErrorCode.UNKNOWN
        assert error.message == "Unknown error"


@pytest.mark.unit
class TestErrorPath:

    def test_no_path(self):
        assert ParseError().path is None

    def test_segments_prepended(self):
        error = TypeMismatchError("bad")
        error.add_path("Amendment")
        error.add_path("Majority")
        error.add_path("0")
        error.add_path("Majorities")
        assert error.path == "Majorities.0.Majority.Amendment"

    def test_path_shows_in_details(self):
        error = InvalidChecksumError()
        error.add_path("Account")
        assert "'path': 'Account'" in str(error)

    def test_details_not_shared(self):
        first, second = ParseError(), ParseError()
        first.add_path("Flags")
        assert second.path is None


@pytest.mark.unit
class TestHierarchy:

    @pytest.mark.parametrize("cls,base", [
        (ParseError, MalformedInputError),
        (IntegerOutOfRangeError, TypeMismatchError),
        (UnknownEnumValueError, TypeMismatchError),
        (OddLengthError, HexError),
        (InvalidChecksumError, AccountIdError),
    ])
    def test_subclasses(self, cls, base):
        assert issubclass(cls, base)
        assert issubclass(cls, BinaryCodecError)

    def test_subclass_codes(self):
        assert ParseError().code == ErrorCode.PARSE_ERROR
        assert IntegerOutOfRangeError().code == ErrorCode.INTEGER_OUT_OF_RANGE
        assert UnknownEnumValueError().code == ErrorCode.UNKNOWN_ENUM_VALUE

    def test_every_exported_error_is_a_codec_error(self):
        for name in errors.__all__:
            obj = getattr(errors, name)
            if name != "ErrorCode":
                assert issubclass(obj, BinaryCodecError), name

    def test_codes_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_group_bases_carry_message(self):
        assert AmountError("x").message == "x"
