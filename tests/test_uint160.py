"""
Test suite for account identifiers

Tests every accepted input form, canonical address rendering, fixed-width
byte rendering and invalid handling.
"""

import pytest

from ledger_values.aliases import AccountAliases
from ledger_values.constants import CONSTS
from ledger_values.errors import InvalidAccountError
from ledger_values.uint160 import UInt160

GENESIS_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
GENESIS_HEX = "B5F762798A53D543A014CAF8B297CFF8F2F937E8"


class TestUInt160Parsing:
    """Test UInt160.from_json input forms"""

    def test_default_is_invalid(self):
        """Test that a default identifier is invalid"""
        account = UInt160()
        assert not account.is_valid()
        assert account.to_json() is None
        assert account.to_bytes() is None
        assert account.to_hex() is None

    def test_zero_forms(self):
        """Test every synonym for the zero account"""
        for form in (None, "", "0", CONSTS.address_xns, CONSTS.hex_xns,
                     CONSTS.uint160_xns, CONSTS.uint160_xns.decode("latin-1")):
            account = UInt160.from_json(form)
            assert account.is_valid()
            assert account.value == 0

    def test_one_forms(self):
        """Test every synonym for the one account"""
        for form in ("1", CONSTS.address_one, CONSTS.hex_one,
                     CONSTS.uint160_one, CONSTS.uint160_one.decode("latin-1")):
            assert UInt160.from_json(form).value == 1

    def test_zero_hex_renders_reserved_address(self):
        """Test that the zero hex form renders as the reserved address"""
        account = UInt160.from_json("0000000000000000000000000000000000000000")
        assert account.to_text() == CONSTS.address_xns
        assert UInt160.from_json(CONSTS.hex_one).to_text() == CONSTS.address_one

    def test_hex_form(self):
        """Test 40-character hex input, either case"""
        upper = UInt160.from_json(GENESIS_HEX)
        lower = UInt160.from_json(GENESIS_HEX.lower())
        assert upper.value == int(GENESIS_HEX, 16)
        assert upper == lower

    def test_invalid_hex(self):
        """Test that 40 characters of non-hex are rejected"""
        assert not UInt160.from_json("Z" * 40).is_valid()
        assert not UInt160.from_json("0x" + "0" * 38).is_valid()

    def test_raw_bytes(self):
        """Test 20-byte input as a big-endian integer"""
        account = UInt160.from_json(bytes(19) + b"\x05")
        assert account.value == 5
        assert UInt160.from_json(bytearray(bytes.fromhex(GENESIS_HEX))).to_hex() == GENESIS_HEX

    def test_raw_bytes_wrong_length(self):
        """Test that byte strings of other lengths are rejected"""
        assert not UInt160.from_json(bytes(19)).is_valid()
        assert not UInt160.from_json(bytes(21)).is_valid()

    def test_address_form(self):
        """Test checksummed address input"""
        account = UInt160.from_json(GENESIS_ADDRESS)
        assert account.is_valid()
        assert account.to_hex() == GENESIS_HEX
        assert account.to_json() == GENESIS_ADDRESS

    def test_bad_address(self):
        """Test that corrupted or foreign text is rejected"""
        corrupted = GENESIS_ADDRESS[:-1] + ("h" if GENESIS_ADDRESS[-1] != "h" else "s")
        assert not UInt160.from_json(corrupted).is_valid()
        assert not UInt160.from_json("rInvalid0").is_valid()
        assert not UInt160.from_json("mtgox").is_valid()

    def test_non_string_input(self):
        """Test that other types are rejected without raising"""
        assert not UInt160.from_json(12).is_valid()
        assert not UInt160.from_json(["r"]).is_valid()
        assert not UInt160.from_json({"account": GENESIS_ADDRESS}).is_valid()

    def test_from_text_alias(self):
        """Test that from_text behaves like from_json"""
        assert UInt160.from_text(GENESIS_ADDRESS) == UInt160.from_json(GENESIS_ADDRESS)

    def test_copy_from_uint160(self):
        """Test that passing an identifier returns an independent clone"""
        original = UInt160.from_json(GENESIS_ADDRESS)
        copy = UInt160.from_json(original)
        assert copy == original
        assert copy is not original


class TestUInt160Aliases:
    """Test nickname substitution"""

    def test_alias_resolved_first(self):
        """Test that a known nickname is replaced by its address"""
        aliases = AccountAliases({"alice": GENESIS_ADDRESS, "zero": CONSTS.hex_xns})
        assert UInt160.from_json("alice", aliases).to_json() == GENESIS_ADDRESS
        assert UInt160.from_json("zero", aliases).value == 0

    def test_unknown_alias(self):
        """Test that unknown nicknames fall through to normal parsing"""
        aliases = AccountAliases({"alice": GENESIS_ADDRESS})
        assert not UInt160.from_json("bob", aliases).is_valid()
        assert UInt160.from_json(GENESIS_HEX, aliases).to_json() == GENESIS_ADDRESS

    def test_json_rewrite(self):
        """Test the rewrite helper"""
        aliases = AccountAliases({"alice": GENESIS_HEX})
        assert UInt160.json_rewrite("alice", aliases) == GENESIS_ADDRESS
        assert UInt160.json_rewrite("garbage") is None


class TestUInt160Rendering:
    """Test fixed-width rendering"""

    def test_small_values_are_left_padded(self):
        """Test padding to 20 bytes"""
        assert UInt160(0).to_bytes() == bytes(20)
        assert UInt160(0x0102).to_bytes() == bytes(18) + b"\x01\x02"
        assert UInt160(1).to_hex() == "0" * 39 + "1"

    def test_wide_values_keep_trailing_bytes(self):
        """Test that only the extra leading bytes are dropped"""
        account = UInt160((1 << 168) | 5)
        assert account.to_bytes() == bytes(19) + b"\x05"

    def test_str(self):
        """Test string conversion"""
        assert str(UInt160.from_json(GENESIS_HEX)) == GENESIS_ADDRESS
        assert str(UInt160()) == "<invalid account>"


class TestUInt160Equality:
    """Test identifier comparison"""

    def test_equal_values(self):
        """Test that equal values from different forms compare equal"""
        assert UInt160.from_json(GENESIS_ADDRESS).equals(UInt160.from_json(GENESIS_HEX))
        assert UInt160.from_json("0") == UInt160.from_json(CONSTS.address_xns)

    def test_different_values(self):
        """Test inequality"""
        assert UInt160.from_json("0") != UInt160.from_json("1")

    def test_invalid_never_equal(self):
        """Test that invalid identifiers are not equal, even to each other"""
        invalid = UInt160()
        assert not invalid.equals(UInt160())
        assert not invalid.equals(invalid)
        assert not UInt160(0).equals(invalid)
        assert not UInt160(0).equals("0")

    def test_hashable(self):
        """Test that identifiers can be used in sets"""
        accounts = {UInt160.from_json(GENESIS_ADDRESS), UInt160.from_json(GENESIS_HEX)}
        assert len(accounts) == 1

    def test_clone_is_independent(self):
        """Test cloning"""
        original = UInt160.from_json(GENESIS_HEX)
        copy = original.clone()
        assert copy == original
        assert copy is not original

    def test_immutable(self):
        """Test that fields cannot be reassigned"""
        account = UInt160(1)
        with pytest.raises(AttributeError):
            account.value = 2

    def test_ensure_valid(self):
        """Test the strict accessor"""
        account = UInt160(1)
        assert account.ensure_valid() is account
        with pytest.raises(InvalidAccountError):
            UInt160().ensure_valid()
