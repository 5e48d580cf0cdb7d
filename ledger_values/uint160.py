"""
Account Identifier Module

160-bit account identifiers and their external forms: checksummed address
text (the canonical form), 40-character hex and raw 20-byte strings.
An identifier that fails to parse is kept as an invalid value rather than
raising.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from .aliases import AccountAliases
from .base_codec import encode_base_check, decode_base_check
from .constants import CONSTS
from .errors import InvalidAccountError
from .logging_config import log_rejection

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9A-Fa-f]{40}")

_ZERO_FORMS = frozenset({"", "0", CONSTS.address_xns, CONSTS.hex_xns,
                         CONSTS.uint160_xns.decode("latin-1")})
_ONE_FORMS = frozenset({"1", CONSTS.address_one, CONSTS.hex_one,
                        CONSTS.uint160_one.decode("latin-1")})


@dataclass(frozen=True, eq=False)
class UInt160:
    """
    Immutable 160-bit account identifier.
    value is None when the identifier is invalid.
    """
    value: Optional[int] = None

    @classmethod
    def from_json(cls, j: Any, aliases: Optional[AccountAliases] = None) -> "UInt160":
        """
        Parse any accepted identifier form

        Args:
            j: Address text, hex text, 20 raw bytes, a reserved sentinel,
               an alias nickname, or another UInt160
            aliases: Optional nickname resolver consulted first

        Returns:
            A new UInt160, invalid if j is not recognised
        """
        if isinstance(j, UInt160):
            return j.clone()

        if aliases is not None and j in aliases:
            j = aliases.resolve(j)

        if isinstance(j, (bytes, bytearray)):
            if len(j) != CONSTS.uint160_bytes:
                return cls._rejected(j)
            return cls(int.from_bytes(bytes(j), "big"))

        if j is None:
            return cls(0)

        if not isinstance(j, str):
            return cls._rejected(j)

        if j in _ZERO_FORMS:
            return cls(0)

        if j in _ONE_FORMS:
            return cls(1)

        if len(j) == CONSTS.uint160_bytes:
            try:
                raw = j.encode("latin-1")
            except UnicodeEncodeError:
                return cls._rejected(j)
            return cls(int.from_bytes(raw, "big"))

        if len(j) == 2 * CONSTS.uint160_bytes:
            if not _HEX_RE.fullmatch(j):
                return cls._rejected(j)
            return cls(int(j, 16))

        if j.startswith(CONSTS.address_prefix):
            value = decode_base_check(CONSTS.account_version, j)
            if value is None:
                return cls._rejected(j)
            return cls(value)

        return cls._rejected(j)

    @classmethod
    def from_text(cls, text: Any, aliases: Optional[AccountAliases] = None) -> "UInt160":
        return cls.from_json(text, aliases)

    @classmethod
    def _rejected(cls, raw: Any) -> "UInt160":
        log_rejection(logger, "account", raw)
        return cls()

    @classmethod
    def json_rewrite(cls, j: Any, aliases: Optional[AccountAliases] = None) -> Optional[str]:
        """Parse j and return its canonical address text"""
        return cls.from_json(j, aliases).to_json()

    def is_valid(self) -> bool:
        return self.value is not None

    def clone(self) -> "UInt160":
        return UInt160(self.value)

    def equals(self, other: "UInt160") -> bool:
        """Equal only if both sides are valid and hold the same value"""
        if not isinstance(other, UInt160):
            return False
        if self.value is None or other.value is None:
            return False
        return self.value == other.value

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(("UInt160", self.value))

    def to_bytes(self) -> Optional[bytes]:
        """
        Exactly 20 big-endian bytes, or None if invalid.
        Shorter values are left-padded with zeros; longer values keep only
        their trailing 20 bytes.
        """
        if self.value is None:
            return None
        raw = self.value.to_bytes(max(1, (self.value.bit_length() + 7) // 8), "big")
        size = CONSTS.uint160_bytes
        if len(raw) < size:
            return bytes(size - len(raw)) + raw
        return raw[len(raw) - size:]

    def to_hex(self) -> Optional[str]:
        """40 uppercase hex characters, or None if invalid"""
        raw = self.to_bytes()
        return raw.hex().upper() if raw is not None else None

    def to_json(self) -> Optional[str]:
        """Checksummed address text, or None if invalid"""
        raw = self.to_bytes()
        if raw is None:
            return None
        return encode_base_check(CONSTS.account_version, raw)

    def to_text(self) -> Optional[str]:
        return self.to_json()

    def ensure_valid(self) -> "UInt160":
        """Return self, raising InvalidAccountError if invalid"""
        if self.value is None:
            raise InvalidAccountError("Invalid account identifier")
        return self

    def __str__(self) -> str:
        text = self.to_json()
        return text if text is not None else "<invalid account>"
