"""
Amount Module

Native and issued-currency amounts with the protocol's canonical decimal
form.

Native amounts are a single signed integer of drops (10^-6 of a unit),
bounded by +/- 9e18. Issued-currency amounts carry a sign, a mantissa, a
power-of-ten offset, a currency and an issuer; every non-zero value is
kept with exactly 16 significant mantissa digits so each real value has
one representation. Zero is stored as mantissa 0, offset -100, positive.

Parsing never raises: bad input yields an invalid amount (mantissa None)
and callers check is_valid() before trusting the result.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .aliases import AccountAliases
from .constants import CONSTS
from .currency import Currency
from .errors import InvalidAmountError
from .logging_config import log_rejection
from .uint160 import UInt160

logger = logging.getLogger(__name__)

# Anchored grammars; ASCII digits only
_NATIVE_RE = re.compile(r"(-?)(\d+)(\.\d{0,%d})?" % CONSTS.xns_precision, re.ASCII)
_INTEGER_RE = re.compile(r"(-?)(\d+)", re.ASCII)
_FIXED_RE = re.compile(r"(-?)(\d+)\.(\d*)", re.ASCII)
_EXPONENT_RE = re.compile(r"(-?)(\d+)e(\d+)", re.ASCII)
_TRIPLE_RE = re.compile(r"(.+)/(...)/(.+)")

# One guard digit past the 16-digit mantissa; canonicalization truncates the rest
_SIGNIFICANT_DIGITS = 17
_EXPONENT_DIGITS = 18


class SourceKind(Enum):
    """Shapes of input accepted by the amount parsers"""
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    AMOUNT = "amount"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


def classify_source(j: Any) -> SourceKind:
    """
    Classify a parser input.

    bool is not a number here and floats are never amounts.
    """
    if isinstance(j, Amount):
        return SourceKind.AMOUNT
    if isinstance(j, bool):
        return SourceKind.UNSUPPORTED
    if isinstance(j, int):
        return SourceKind.INTEGER
    if isinstance(j, Decimal):
        return SourceKind.DECIMAL
    if isinstance(j, str):
        return SourceKind.TEXT
    if isinstance(j, Mapping):
        return SourceKind.MAPPING
    return SourceKind.UNSUPPORTED


def leading_digits(digits: str) -> Tuple[int, int]:
    """
    Integer value of the leading significant digits of a digit string.

    Returns:
        (value, dropped) where dropped counts the trailing digits cut off
    """
    digits = digits.lstrip("0")
    dropped = max(0, len(digits) - _SIGNIFICANT_DIGITS)
    return int(digits[:_SIGNIFICANT_DIGITS] or "0"), dropped


def canonical_parts(mantissa: int, offset: int, negative: bool) -> Tuple[int, int, bool]:
    """
    Normalize a non-negative mantissa and offset to the canonical form.

    Returns:
        (mantissa, offset, negative) with mantissa in [10^15, 10^16 - 1],
        or (0, -100, False) for zero
    """
    if mantissa == 0:
        return 0, CONSTS.zero_offset, False

    while mantissa < CONSTS.man_min_value:
        mantissa *= 10
        offset -= 1

    while mantissa > CONSTS.man_max_value:
        mantissa //= 10
        offset += 1

    return mantissa, offset, negative


@dataclass(frozen=True, eq=False)
class Amount:
    """
    Immutable ledger amount.

    mantissa is None for an invalid amount. For native amounts it is the
    signed drop count and offset/negative are None. For issued amounts it
    is the non-negative canonical mantissa, with the sign in negative.
    """
    mantissa: Optional[int] = 0
    offset: Optional[int] = None
    native: bool = True
    negative: Optional[bool] = None
    currency: Currency = field(default_factory=Currency)
    issuer: UInt160 = field(default_factory=UInt160)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def invalid(cls, native: bool = True) -> "Amount":
        return cls(mantissa=None, native=native)

    @classmethod
    def from_parts(cls, mantissa: int, offset: int, negative: bool = False,
                   currency: Optional[Currency] = None,
                   issuer: Optional[UInt160] = None) -> "Amount":
        """Build a canonical issued amount from a mantissa and offset"""
        mantissa, offset, negative = canonical_parts(mantissa, offset, negative)
        return cls(
            mantissa=mantissa,
            offset=offset,
            native=False,
            negative=negative,
            currency=currency if currency is not None else Currency(),
            issuer=issuer if issuer is not None else UInt160()
        )

    @classmethod
    def parse_native(cls, j: Any) -> "Amount":
        """
        Parse a native amount from untrusted text.

        Integer notation is a raw drop count; a decimal point switches to
        whole units with up to 6 fraction digits ("1.5" is 1500000 drops).

        Returns:
            A native amount, invalid if j does not match or is out of bounds
        """
        match = _NATIVE_RE.fullmatch(j) if isinstance(j, str) else None
        if not match:
            log_rejection(logger, "amount", j, "not native notation")
            return cls.invalid()

        sign, whole, fraction = match.groups()
        whole = whole.lstrip("0") or "0"
        if len(whole) > len(str(CONSTS.xns_max)):
            log_rejection(logger, "amount", j, "native amount out of bounds")
            return cls.invalid()

        if fraction is None:
            value = int(whole)
        else:
            digits = fraction[1:]
            value = int(whole) * CONSTS.xns_unit
            if digits:
                value += int(digits) * 10 ** (CONSTS.xns_precision - len(digits))

        if sign:
            value = -value

        if not CONSTS.xns_min <= value <= CONSTS.xns_max:
            log_rejection(logger, "amount", j, "native amount out of bounds")
            return cls.invalid()

        return cls(mantissa=value)

    @classmethod
    def parse_value(cls, j: Any) -> "Amount":
        """
        Parse the numeric part of an issued amount.

        Accepts integer ("-12"), fixed point ("1.25") and exponential
        ("5e3") text, int and Decimal values, or another Amount. The
        currency and issuer of the result are left at their defaults.
        """
        kind = classify_source(j)

        if kind is SourceKind.TEXT:
            return cls._parse_value_text(j)

        if kind is SourceKind.INTEGER:
            return cls.from_parts(abs(j), 0, j < 0)

        if kind is SourceKind.DECIMAL:
            if not j.is_finite():
                log_rejection(logger, "amount", j, "non-finite decimal")
                return cls.invalid(native=False)
            sign, digits, exponent = j.as_tuple()
            if abs(exponent) >= 10 ** _EXPONENT_DIGITS:
                log_rejection(logger, "amount", j, "exponent out of range")
                return cls.invalid(native=False)
            mantissa, dropped = leading_digits("".join(str(d) for d in digits))
            return cls.from_parts(mantissa, exponent + dropped, bool(sign))

        if kind is SourceKind.AMOUNT:
            if not j.is_valid():
                return cls.invalid(native=False)
            if j.native:
                return cls.from_parts(abs(j.mantissa), -CONSTS.xns_precision, j.mantissa < 0)
            return cls.from_parts(j.mantissa, j.offset or 0, bool(j.negative))

        log_rejection(logger, "amount", j, f"unsupported {kind.value} value")
        return cls.invalid(native=False)

    @classmethod
    def _parse_value_text(cls, text: str) -> "Amount":
        match = _INTEGER_RE.fullmatch(text)
        if match:
            sign, digits = match.groups()
            mantissa, dropped = leading_digits(digits)
            return cls.from_parts(mantissa, dropped, bool(sign))

        match = _FIXED_RE.fullmatch(text)
        if match:
            sign, whole, fraction = match.groups()
            mantissa, dropped = leading_digits(whole + fraction)
            return cls.from_parts(mantissa, dropped - len(fraction), bool(sign))

        match = _EXPONENT_RE.fullmatch(text)
        if match:
            sign, digits, exponent = match.groups()
            exponent = exponent.lstrip("0") or "0"
            if len(exponent) > _EXPONENT_DIGITS:
                log_rejection(logger, "amount", text, "exponent out of range")
                return cls.invalid(native=False)
            mantissa, dropped = leading_digits(digits)
            return cls.from_parts(mantissa, int(exponent) + dropped, bool(sign))

        log_rejection(logger, "amount", text, "not a decimal value")
        return cls.invalid(native=False)

    @classmethod
    def parse_json(cls, j: Any, aliases: Optional[AccountAliases] = None) -> "Amount":
        """
        Parse an amount in any accepted JSON shape.

        - "100" or "1.5": native amount
        - "100/USD/rIssuer...": issued amount in debug notation (not a
          wire format, accepted for testing)
        - {"value": ..., "currency": ..., "issuer": ...}: issued amount
        - an Amount: copied

        Args:
            j: Input value
            aliases: Optional account nickname resolver for issuers
        """
        kind = classify_source(j)

        if kind is SourceKind.TEXT:
            match = _TRIPLE_RE.fullmatch(j)
            if match:
                value, currency, issuer = match.groups()
                return replace(
                    cls.parse_value(value),
                    currency=Currency.from_json(currency),
                    issuer=UInt160.from_json(issuer, aliases)
                )
            return replace(cls.parse_native(j), currency=Currency(), issuer=UInt160())

        if kind is SourceKind.AMOUNT:
            return j.clone()

        if kind is SourceKind.MAPPING and "value" in j:
            # Issued amounts are never native, whatever currency says
            return replace(
                cls.parse_value(j["value"]),
                currency=Currency.from_json(j.get("currency")),
                issuer=UInt160.from_json(j.get("issuer"), aliases)
            )

        log_rejection(logger, "amount", j, f"unsupported {kind.value} shape")
        return cls.invalid()

    @classmethod
    def from_json(cls, j: Any, aliases: Optional[AccountAliases] = None) -> "Amount":
        return cls.parse_json(j, aliases)

    @classmethod
    def json_rewrite(cls, j: Any, aliases: Optional[AccountAliases] = None) -> Union[str, Dict[str, Any], None]:
        """Given "100/USD/mtgox" return the JSON form"""
        return cls.from_json(j, aliases).to_json()

    @classmethod
    def text_full_rewrite(cls, j: Any, aliases: Optional[AccountAliases] = None) -> Optional[str]:
        """Given "100/USD/mtgox" return the full text with the issuer resolved"""
        return cls.from_json(j, aliases).to_text_full()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def canonicalize(self) -> "Amount":
        """Return the canonical form; native and invalid amounts are returned as is"""
        if self.mantissa is None or self.native:
            return self
        mantissa, offset, negative = canonical_parts(
            self.mantissa, self.offset or 0, bool(self.negative)
        )
        return replace(self, mantissa=mantissa, offset=offset, negative=negative)

    def clone(self) -> "Amount":
        return replace(self, currency=self.currency.clone(), issuer=self.issuer.clone())

    def with_sign_flipped(self) -> "Amount":
        """Return a new amount with the opposite sign"""
        if self.mantissa is None:
            return self.clone()
        if self.native:
            return replace(self.clone(), mantissa=-self.mantissa)
        if self.mantissa == 0:
            return self.clone().canonicalize()
        return replace(self.clone(), negative=not self.negative)

    def negate(self) -> "Amount":
        return self.with_sign_flipped()

    def with_issuer(self, issuer: Any, aliases: Optional[AccountAliases] = None) -> "Amount":
        """Return a copy with the issuer replaced"""
        return replace(self, issuer=UInt160.from_json(issuer, aliases))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        return self.mantissa is not None

    def is_native(self) -> bool:
        return self.native

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def is_negative(self) -> bool:
        if self.mantissa is None:
            return False
        if self.native:
            return self.mantissa < 0
        return bool(self.negative) and self.mantissa != 0

    def ensure_valid(self) -> "Amount":
        """Return self, raising InvalidAmountError if invalid"""
        if self.mantissa is None:
            raise InvalidAmountError("Invalid amount")
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _in_native_bounds(self) -> bool:
        return CONSTS.xns_min <= self.mantissa <= CONSTS.xns_max

    def to_text(self, allow_invalid: bool = False) -> Optional[str]:
        """
        Render the value only.

        Args:
            allow_invalid: Return None for an invalid amount instead of "0"

        Returns:
            Drop count for native amounts; for issued amounts plain
            decimal when the offset is in [-25, -5], else mantissa e offset
        """
        if self.mantissa is None or (self.native and not self._in_native_bounds()):
            return None if allow_invalid else "0"

        if self.native:
            return str(self.mantissa)

        if self.mantissa == 0:
            return "0"

        sign = "-" if self.negative else ""
        offset = self.offset or 0

        if offset < CONSTS.text_offset_min or offset > CONSTS.text_offset_max:
            return f"{sign}{self.mantissa}e{offset}"

        digits = str(self.mantissa)
        scale = -offset
        if len(digits) <= scale:
            digits = "0" * (scale - len(digits) + 1) + digits

        whole = digits[:-scale].lstrip("0") or "0"
        fraction = digits[-scale:].rstrip("0")

        return sign + whole + ("." + fraction if fraction else "")

    def to_text_full(self) -> Optional[str]:
        """
        value/XNS for native amounts, value/currency/issuer otherwise.
        An invalid issuer renders as "<invalid account>".
        """
        if self.mantissa is None:
            return None
        if self.native:
            return f"{self.to_text()}/{CONSTS.currency_xns}"
        return f"{self.to_text()}/{self.currency.to_json()}/{self.issuer}"

    def to_json(self) -> Union[str, Dict[str, Any], None]:
        if self.native:
            return self.to_text()
        return {
            "value": self.to_text(),
            "currency": self.currency.to_json(),
            "issuer": self.issuer.to_json(),
        }

    def to_decimal(self) -> Optional[Decimal]:
        """Exact Decimal value: whole units for native amounts, None if invalid"""
        if self.mantissa is None:
            return None
        if self.native:
            return Decimal(f"{self.mantissa}E-{CONSTS.xns_precision}")
        sign = "-" if self.negative else ""
        return Decimal(f"{sign}{self.mantissa}E{self.offset or 0}")

    def __str__(self) -> str:
        text = self.to_text_full()
        return text if text is not None else "<invalid amount>"

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equals(self, other: Any) -> bool:
        """
        Compare numeric values.

        Invalid amounts equal nothing, not even themselves. Issued amounts
        compare by sign and canonical value, with -0 equal to 0. A string
        is parsed with from_json first. Currency and issuer are not
        compared.
        """
        if isinstance(other, str):
            other = Amount.from_json(other)
        if not isinstance(other, Amount):
            return False
        if self.mantissa is None or other.mantissa is None:
            return False
        if self.native != other.native:
            return False
        if self.native:
            return self.mantissa == other.mantissa

        left, right = self.canonicalize(), other.canonicalize()
        if left.mantissa == 0 and right.mantissa == 0:
            return True
        return (bool(left.negative) == bool(right.negative)
                and left.mantissa == right.mantissa
                and left.offset == right.offset)

    def __eq__(self, other: object) -> bool:
        # Amounts only; equals() also takes text
        if not isinstance(other, Amount):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        if self.mantissa is None:
            return hash(("Amount", None))
        if self.native:
            return hash(("Amount", True, self.mantissa))
        canonical = self.canonicalize()
        if canonical.mantissa == 0:
            return hash(("Amount", False, 0))
        return hash(("Amount", False, bool(canonical.negative),
                     canonical.mantissa, canonical.offset))
