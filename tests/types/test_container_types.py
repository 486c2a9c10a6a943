"""
STObject, STArray, PathSet and Vector256 tests.

Container encoders recurse through the serializer, so these go through
TransactionSerializer.encode_field with real field definitions.
"""

import pytest

from rippled_binary_codec import SerializerOptions, TransactionSerializer
from rippled_binary_codec.runtime.errors import (
    InvalidCurrencyError, InvalidHashLengthError, MalformedInputError, NestingTooDeepError,
    TypeMismatchError, UnknownFieldNameError
)
from rippled_binary_codec.types.path_set import PATH_SET, encode_path_step
from rippled_binary_codec.types.st_object import ST_OBJECT
from rippled_binary_codec.types.vector256 import VECTOR256

ACCOUNT_A = "rPDXxSZcuVL3ZWoyU82bcde3zwvmShkRyF"
ACCOUNT_A_ID = "f3b1997562fd742b54d4ebdea1d6aea3d4906b8f"
ACCOUNT_B = "rMwjYedjc7qqtKYVLiAccJSmCwih4LnE2q"
ACCOUNT_B_ID = "dd39c650a96eda48334e70cc4a85b8b2e8502cd3"
USD = "0000000000000000000000005553440000000000"


def encode(serializer, name, value):
    return serializer.encode_field(serializer.registry.lookup_field(name), value).hex()


@pytest.mark.unit
class TestSTObject:

    def test_signer_entry(self, serializer):
        assert encode(serializer, "SignerEntry", {"SignerWeight": 1}) == "eb" "130001" "e1"

    def test_inner_fields_sorted(self, serializer):
        memo = {"MemoData": "72656e74", "MemoType": "636C69656E74"}
        assert encode(serializer, "Memo", memo) == "ea" "7c06636c69656e74" "7d0472656e74" "e1"

    def test_empty_object(self, serializer):
        assert encode(serializer, "Memo", {}) == "eae1"

    def test_signing_filter_not_applied_inside(self, serializer):
        assert ST_OBJECT.to_bytes({"TxnSignature": "AB"}, serializer, 0).hex() == "7401ab" "e1"

    def test_unserialized_fields_dropped_inside(self, serializer):
        assert encode(serializer, "Memo", {"MemoData": "00", "hash": "00" * 32}) == "ea7d0100e1"

    def test_unknown_inner_field(self, serializer):
        with pytest.raises(UnknownFieldNameError) as exc_info:
            encode(serializer, "Memo", {"MemoDta": "00"})
        assert exc_info.value.path == "Memo"

    @pytest.mark.parametrize("value", ["abc", ["x"], 1, None])
    def test_not_an_object(self, serializer, value):
        with pytest.raises(TypeMismatchError):
            encode(serializer, "Memo", value)


@pytest.mark.unit
class TestSTArray:

    def test_memos(self, serializer):
        assert encode(serializer, "Memos", [{"Memo": {"MemoData": "72656e74"}}]) == (
            "f9" "ea7d0472656e74e1" "f1"
        )

    def test_empty_array(self, serializer):
        assert encode(serializer, "Memos", []) == "f9f1"

    def test_element_order_kept(self, serializer):
        entries = [
            {"SignerEntry": {"SignerWeight": 2}},
            {"SignerEntry": {"SignerWeight": 1}},
        ]
        assert encode(serializer, "SignerEntries", entries) == (
            "f4" "eb130002e1" "eb130001e1" "f1"
        )

    def test_signers_keep_signatures(self, serializer):
        signers = [{"Signer": {"TxnSignature": "00", "SigningPubKey": "01"}}]
        assert encode(serializer, "Signers", signers) == "f3" "e010" "730101" "740100" "e1" "f1"

    @pytest.mark.parametrize("element", [
        {"Memo": {}, "Signer": {}},
        {},
        "Memo",
        ["Memo"],
    ])
    def test_malformed_elements(self, serializer, element):
        with pytest.raises(MalformedInputError) as exc_info:
            encode(serializer, "Memos", [element])
        assert exc_info.value.path == "Memos.0"

    def test_wrapper_must_be_object_field(self, serializer):
        with pytest.raises(TypeMismatchError) as exc_info:
            encode(serializer, "Memos", [{"Memo": {}}, {"Account": {}}])
        assert exc_info.value.path == "Memos.1"

    def test_error_path_reaches_inner_field(self, serializer):
        with pytest.raises(InvalidHashLengthError) as exc_info:
            encode(serializer, "Majorities", [{"Majority": {"Amendment": "00"}}])
        assert exc_info.value.path == "Majorities.0.Majority.Amendment"

    def test_not_a_list(self, serializer):
        with pytest.raises(TypeMismatchError):
            encode(serializer, "Memos", {"Memo": {}})


@pytest.mark.unit
class TestNesting:

    @staticmethod
    def nested_memo(levels):
        value = {}
        for _ in range(levels):
            value = {"Memo": value}
        return value

    def test_depth_limit(self, registry):
        shallow = TransactionSerializer(registry, SerializerOptions(max_depth=1))
        encode(shallow, "Memo", {})
        with pytest.raises(NestingTooDeepError):
            encode(shallow, "Memo", {"Memo": {}})

    def test_array_counts_as_a_level(self, registry):
        tx = {"Memos": [{"Memo": {"MemoData": "00"}}]}
        TransactionSerializer(registry, SerializerOptions(max_depth=2)).serialize(tx)
        with pytest.raises(NestingTooDeepError):
            TransactionSerializer(registry, SerializerOptions(max_depth=1)).serialize(tx)

    def test_default_limit(self, serializer):
        encode(serializer, "Memo", self.nested_memo(31))
        with pytest.raises(NestingTooDeepError) as exc_info:
            encode(serializer, "Memo", self.nested_memo(40))
        assert exc_info.value.path.startswith("Memo.Memo.Memo")

    def test_nesting_error_code(self, registry):
        shallow = TransactionSerializer(registry, SerializerOptions(max_depth=1))
        with pytest.raises(NestingTooDeepError) as exc_info:
            shallow.serialize({"Memos": [{"Memo": {}}]})
        assert exc_info.value.to_dict()["code"] == 106


@pytest.mark.unit
class TestPathSet:

    def test_single_account_step(self):
        assert PATH_SET.to_bytes([[{"account": ACCOUNT_A}]]).hex() == "01" + ACCOUNT_A_ID + "00"

    def test_xrp_currency_step(self):
        assert PATH_SET.to_bytes([[{"currency": "XRP"}]]).hex() == "10" + "00" * 20 + "00"

    def test_combined_flags(self):
        step = {"currency": "USD", "issuer": ACCOUNT_B}
        assert encode_path_step(step).hex() == "30" + USD + ACCOUNT_B_ID

    def test_all_three_parts_in_order(self):
        step = {"issuer": ACCOUNT_B, "currency": "USD", "account": ACCOUNT_A}
        assert encode_path_step(step).hex() == "31" + ACCOUNT_A_ID + USD + ACCOUNT_B_ID

    def test_informational_keys_ignored(self):
        step = {"account": ACCOUNT_A, "type": 1, "type_hex": "0000000000000001"}
        assert encode_path_step(step) == encode_path_step({"account": ACCOUNT_A})

    def test_paths_separated(self):
        paths = [[{"account": ACCOUNT_A}], [{"account": ACCOUNT_B}, {"currency": "XRP"}]]
        assert PATH_SET.to_bytes(paths).hex() == (
            "01" + ACCOUNT_A_ID + "ff" + "01" + ACCOUNT_B_ID + "10" + "00" * 20 + "00"
        )

    def test_field_header(self, serializer):
        assert encode(serializer, "Paths", [[{"account": ACCOUNT_A}]]).startswith("0112")

    @pytest.mark.parametrize("paths", [[], [[]], [[{"account": ACCOUNT_A}], []]])
    def test_empty_sets_and_paths(self, paths):
        with pytest.raises(MalformedInputError):
            PATH_SET.to_bytes(paths)

    @pytest.mark.parametrize("step", [{}, {"type": 1}, {"account": ACCOUNT_A, "issuser": ACCOUNT_B}])
    def test_malformed_steps(self, step):
        with pytest.raises(MalformedInputError):
            encode_path_step(step)

    def test_error_path(self, serializer):
        paths = [[{"account": ACCOUNT_A}], [{"account": ACCOUNT_B}, {"currency": "US"}]]
        with pytest.raises(InvalidCurrencyError) as exc_info:
            encode(serializer, "Paths", paths)
        assert exc_info.value.path == "Paths.1.1"

    @pytest.mark.parametrize("paths", ["x", [{"account": ACCOUNT_A}], [["x"]]])
    def test_wrong_shapes(self, paths):
        with pytest.raises(TypeMismatchError):
            PATH_SET.to_bytes(paths)


@pytest.mark.unit
class TestVector256:

    def test_concatenates(self):
        hashes = ["AA" * 32, "BB" * 32]
        assert VECTOR256.to_bytes(hashes) == b"\xaa" * 32 + b"\xbb" * 32

    def test_field_is_length_prefixed(self, serializer):
        assert encode(serializer, "Amendments", ["00" * 32, "11" * 32]) == (
            "0313" + "40" + "00" * 32 + "11" * 32
        )

    def test_empty(self, serializer):
        assert encode(serializer, "Hashes", []) == "021300"

    def test_bad_element(self, serializer):
        with pytest.raises(InvalidHashLengthError) as exc_info:
            encode(serializer, "Hashes", ["00" * 32, "00" * 31])
        assert exc_info.value.path == "Hashes.1"
