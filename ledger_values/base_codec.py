"""
Base-N Check Codec Module

Reversible mapping between byte strings and text over a 58-symbol
alphabet, plus the version/checksum envelope used for account addresses.

Leading zero bytes are written as leading zero-symbols so the byte length
survives the round trip. Decoding never raises on bad input: it returns
None and leaves the caller to mark its own value invalid.
"""

import hashlib
import logging
from typing import Optional

from .constants import ALPHABETS, DEFAULT_ALPHABET, CONSTS
from .errors import UnknownAlphabetError

logger = logging.getLogger(__name__)


def get_alphabet(name: Optional[str] = None) -> str:
    """Look up an alphabet by name (default: ripple)"""
    name = name or DEFAULT_ALPHABET
    try:
        return ALPHABETS[name]
    except KeyError:
        raise UnknownAlphabetError(f"Unknown alphabet '{name}'")


def double_sha256(data: bytes) -> bytes:
    """SHA-256 applied twice"""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def checksum(data: bytes) -> bytes:
    """First four bytes of the double SHA-256 of data"""
    return double_sha256(data)[:CONSTS.checksum_bytes]


def encode_base(data: bytes, alphabet: Optional[str] = None) -> str:
    """
    Encode bytes as base-N text.

    Args:
        data: Big-endian byte string
        alphabet: Alphabet name (ripple or bitcoin)

    Returns:
        Encoded text, at least one symbol per leading zero byte
    """
    symbols = get_alphabet(alphabet)
    base = len(symbols)
    value = int.from_bytes(bytes(data), "big")

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(symbols[remainder])

    for byte in data:
        if byte:
            break
        digits.append(symbols[0])

    return "".join(reversed(digits))


def decode_base(text: str, alphabet: Optional[str] = None) -> Optional[bytes]:
    """
    Decode base-N text back to bytes.

    Returns:
        The decoded bytes, or None if text holds a symbol outside the alphabet
    """
    symbols = get_alphabet(alphabet)
    base = len(symbols)

    if not isinstance(text, str):
        return None

    zeros = len(text) - len(text.lstrip(symbols[0]))

    value = 0
    for char in text[zeros:]:
        digit = symbols.find(char)
        if digit < 0:
            logger.debug("Rejected base-N text: bad symbol %r", char)
            return None
        value = value * base + digit

    body = value.to_bytes((value.bit_length() + 7) // 8, "big")
    return bytes(zeros) + body


def encode_base_check(version: int, payload: bytes, alphabet: Optional[str] = None) -> str:
    """Encode version ++ payload ++ checksum as base-N text"""
    buffer = bytes([version]) + bytes(payload)
    return encode_base(buffer + checksum(buffer), alphabet)


def decode_base_check(version: int, text: str, alphabet: Optional[str] = None) -> Optional[int]:
    """
    Decode and verify checksummed base-N text.

    Args:
        version: Expected leading version byte
        text: Encoded text
        alphabet: Alphabet name

    Returns:
        Payload as a non-negative integer (version and checksum stripped),
        or None if decoding, the version byte or the checksum fails
    """
    buffer = decode_base(text, alphabet)

    if buffer is None or len(buffer) < CONSTS.checksum_bytes + 1 or buffer[0] != version:
        logger.debug("Rejected checked text: bad length or version")
        return None

    body, check = buffer[:-CONSTS.checksum_bytes], buffer[-CONSTS.checksum_bytes:]
    if checksum(body) != check:
        logger.debug("Rejected checked text: checksum mismatch")
        return None

    return int.from_bytes(body[1:], "big")
