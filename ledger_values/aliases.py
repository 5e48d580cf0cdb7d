"""
Account Alias Module

Lets fixtures and operators refer to accounts by nickname ("alice",
"mtgox") instead of their checksummed address. The resolver is passed in
explicitly to the parsers; nothing here is consulted implicitly.

Alias files are JSON, either ``{"alice": {"account": "r..."}}`` or the
flat ``{"alice": "r..."}``.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Union

from .errors import AliasFileError

logger = logging.getLogger(__name__)


class AccountAliases:
    """Read-only nickname to address table"""

    def __init__(self, accounts: Optional[Mapping[str, str]] = None):
        self._accounts: Dict[str, str] = dict(accounts or {})

    def resolve(self, name: str) -> Optional[str]:
        """Return the address for a nickname, or None if unknown"""
        if not isinstance(name, str):
            return None
        return self._accounts.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._accounts

    def __iter__(self) -> Iterator[str]:
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "AccountAliases":
        """Build from either the nested or the flat alias shape"""
        accounts: Dict[str, str] = {}
        for name, entry in data.items():
            if isinstance(entry, Mapping):
                entry = entry.get("account")
            if not isinstance(entry, str):
                raise AliasFileError(f"Alias '{name}' has no account address")
            accounts[name] = entry
        return cls(accounts)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AccountAliases":
        """
        Load aliases from a JSON file

        Raises:
            AliasFileError: If the file is missing, not JSON, or malformed
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise AliasFileError(f"Cannot read alias file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise AliasFileError(f"Alias file {path} is not valid JSON: {e}") from e

        if not isinstance(data, Mapping):
            raise AliasFileError(f"Alias file {path} must contain a JSON object")

        aliases = cls.from_dict(data)
        logger.info(f"Loaded {len(aliases)} account aliases from {path}")
        return aliases

    @classmethod
    def from_config(cls, config) -> "AccountAliases":
        """Load the configured alias file, or return an empty table"""
        if not config.accounts_file:
            return cls()
        return cls.load(config.accounts_file)
