"""
Currency Code Module

Currency of an amount: either the native asset (XNS) or an opaque
three-character issued-currency code. "", "0" and "XNS" all name the
native asset.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .constants import CONSTS
from .errors import InvalidCurrencyError
from .logging_config import log_rejection

logger = logging.getLogger(__name__)

NATIVE_FORMS = frozenset({"", "0", CONSTS.currency_xns})


@dataclass(frozen=True, eq=False)
class Currency:
    """
    Immutable currency code.
    code is "XNS" for the native asset and None when invalid.
    """
    code: Optional[str] = CONSTS.currency_xns

    @classmethod
    def from_json(cls, j: Any) -> "Currency":
        """Parse a currency code; anything other than a 3-character string is invalid"""
        if isinstance(j, Currency):
            return j.clone()
        if isinstance(j, str) and j in NATIVE_FORMS:
            return cls.native()
        if not isinstance(j, str) or len(j) != 3:
            log_rejection(logger, "currency", j)
            return cls(None)
        return cls(j)

    @classmethod
    def from_text(cls, text: Any) -> "Currency":
        return cls.from_json(text)

    @classmethod
    def native(cls) -> "Currency":
        return cls(CONSTS.currency_xns)

    @classmethod
    def json_rewrite(cls, j: Any) -> str:
        """Given "USD" return its JSON form"""
        return cls.from_json(j).to_json()

    def is_valid(self) -> bool:
        return self.code is not None

    def is_native(self) -> bool:
        return self.code == CONSTS.currency_xns

    def clone(self) -> "Currency":
        return Currency(self.code)

    def equals(self, other: "Currency") -> bool:
        if not isinstance(other, Currency):
            return False
        if self.code is None or other.code is None:
            return False
        return self.code == other.code

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(("Currency", self.code))

    def to_json(self) -> str:
        # Invalid codes render as the native code
        return self.code if self.code else CONSTS.currency_xns

    def to_text(self) -> str:
        return self.to_json()

    def to_human(self) -> str:
        return self.to_json()

    def to_display(self) -> str:
        return self.to_json()

    def ensure_valid(self) -> "Currency":
        """Return self, raising InvalidCurrencyError if invalid"""
        if self.code is None:
            raise InvalidCurrencyError("Invalid currency code")
        return self

    def __str__(self) -> str:
        return self.to_human()
