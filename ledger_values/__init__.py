"""
Ledger Values

Canonical value types for a distributed ledger protocol: checksummed
account identifiers, currency codes and arbitrary-precision amounts,
with the text and JSON codecs every node must agree on bit-for-bit.
"""

__version__ = "1.0.0"

from .amount import Amount, SourceKind, classify_source
from .currency import Currency
from .uint160 import UInt160
from .errors import (
    LedgerValueError, InvalidAmountError, InvalidAccountError,
    InvalidCurrencyError, UnknownAlphabetError, AliasFileError
)

__all__ = [
    "Amount",
    "SourceKind",
    "classify_source",
    "Currency",
    "UInt160",
    "LedgerValueError",
    "InvalidAmountError",
    "InvalidAccountError",
    "InvalidCurrencyError",
    "UnknownAlphabetError",
    "AliasFileError",
]
