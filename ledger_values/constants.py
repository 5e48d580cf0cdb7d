"""
Protocol Constants Module

Read-only table of consensus-relevant constants: native-unit scale and
bounds, canonical mantissa range, reserved identifiers and the base-N
alphabets. Built once at import time and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


ALPHABETS: Mapping[str, str] = MappingProxyType({
    "ripple": "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz",
    "bitcoin": "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz",
})

DEFAULT_ALPHABET = "ripple"


@dataclass(frozen=True)
class ProtocolConstants:
    """
    Immutable protocol constants shared by every value type.
    Changing any of these changes the wire format.
    """
    # Reserved account identifiers in each accepted form
    address_xns: str = "rrrrrrrrrrrrrrrrrrrrrhoLvTp"
    address_one: str = "rrrrrrrrrrrrrrrrrrrrBZbvji"
    uint160_xns: bytes = bytes(20)
    uint160_one: bytes = bytes(19) + b"\x01"
    hex_xns: str = "0" * 40
    hex_one: str = "0" * 39 + "1"

    # Native asset
    currency_xns: str = "XNS"
    xns_precision: int = 6
    xns_unit: int = 10 ** 6
    xns_max: int = 9_000_000_000_000_000_000   # JSON wire limit
    xns_min: int = -9_000_000_000_000_000_000

    # Non-native canonical form: 16 significant digits
    man_min_value: int = 10 ** 15
    man_max_value: int = 10 ** 16 - 1
    zero_offset: int = -100

    # Offsets rendered in fixed-point notation; anything else uses e notation
    text_offset_min: int = -25
    text_offset_max: int = -5

    # Account identifiers
    account_version: int = 0
    address_prefix: str = "r"
    uint160_bytes: int = 20
    checksum_bytes: int = 4


CONSTS = ProtocolConstants()
