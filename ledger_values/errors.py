"""
Error Types

Value failures are carried in-band as invalid values; these exceptions are
only raised by the opt-in strict helpers (``ensure_valid``), alias loading,
alphabet lookup and the command-line tool. All derive from ValueError so
callers catching ValueError keep working.
"""


class LedgerValueError(ValueError):
    """Base class for all ledger value errors"""


class InvalidAmountError(LedgerValueError):
    """Amount text or JSON could not be parsed"""


class InvalidAccountError(LedgerValueError):
    """Account identifier could not be parsed"""


class InvalidCurrencyError(LedgerValueError):
    """Currency code could not be parsed"""


class UnknownAlphabetError(LedgerValueError):
    """Requested base-N alphabet is not defined"""


class AliasFileError(LedgerValueError):
    """Account alias file is missing or malformed"""
