"""
Command-Line Rewriter

Parses a value from the command line and prints its canonical form:

    python -m ledger_values amount "100/USD/rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
    python -m ledger_values account 0000000000000000000000000000000000000000
    python -m ledger_values encode 00287fb4cd --alphabet bitcoin
"""

import argparse
import json
import sys
from typing import List, Optional

from .aliases import AccountAliases
from .amount import Amount
from .base_codec import encode_base, decode_base
from .constants import ALPHABETS
from .config import get_config
from .currency import Currency
from .errors import LedgerValueError
from .logging_config import setup_logging
from .uint160 import UInt160


def build_parser(default_alphabet: str = "ripple") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger_values",
        description="Rewrite ledger amounts, accounts and currencies into canonical form"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    amount = subparsers.add_parser("amount", help="Print an amount as JSON")
    amount.add_argument("value")

    amount_full = subparsers.add_parser("amount-full", help="Print value/currency/issuer text")
    amount_full.add_argument("value")

    account = subparsers.add_parser("account", help="Print an account address")
    account.add_argument("value")
    account.add_argument("--hex", action="store_true", help="Print 40-character hex instead")

    currency = subparsers.add_parser("currency", help="Print a currency code")
    currency.add_argument("value")

    for name, help_text in (("encode", "Encode hex bytes as base-N text"),
                            ("decode", "Decode base-N text to hex bytes")):
        codec = subparsers.add_parser(name, help=help_text)
        codec.add_argument("value")
        codec.add_argument("--alphabet", default=default_alphabet,
                           choices=sorted(ALPHABETS))

    return parser


def run(args: argparse.Namespace, aliases: AccountAliases) -> str:
    """Execute one command and return the text to print"""
    if args.command == "amount":
        amount = Amount.from_json(args.value, aliases).ensure_valid()
        return json.dumps(amount.to_json())

    if args.command == "amount-full":
        return Amount.from_json(args.value, aliases).ensure_valid().to_text_full()

    if args.command == "account":
        account = UInt160.from_json(args.value, aliases).ensure_valid()
        return account.to_hex() if args.hex else account.to_json()

    if args.command == "currency":
        return Currency.from_json(args.value).ensure_valid().to_json()

    if args.command == "encode":
        try:
            data = bytes.fromhex(args.value)
        except ValueError as e:
            raise LedgerValueError(f"Invalid hex input: {e}") from e
        return encode_base(data, args.alphabet)

    data = decode_base(args.value, args.alphabet)
    if data is None:
        raise LedgerValueError(f"Text is not valid {args.alphabet} base-N")
    return data.hex()


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    logger = setup_logging(config.log_level, fmt=config.log_format)

    args = build_parser(config.default_alphabet).parse_args(argv)

    try:
        aliases = AccountAliases.from_config(config)
        output = run(args, aliases)
    except LedgerValueError as e:
        logger.debug(f"Command {args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0
