"""
Utility functions for sweb3-signer.
"""
import re
from typing import Union

import nacl.utils
from web3 import Web3

DEFAULT_NONCE_SIZE = 5

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def strip_hex_prefix(value: str) -> str:
    """Remove a leading ``0x``/``0X`` if present."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_to_bytes(value: str) -> bytes:
    """
    Convert hex text to bytes.

    Args:
        value: Hex string, with or without ``0x`` prefix. Odd-length input is
            left-padded with a single ``0``.

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string contains non-hex characters
    """
    digits = strip_hex_prefix(value)
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"Invalid hex string: {value!r}")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def bytes_to_hex(data: Union[bytes, bytearray], prefix: bool = True) -> str:
    """
    Convert bytes to lower-case hex text.

    Args:
        data: Bytes to encode
        prefix: Whether to prepend ``0x``

    Returns:
        Hex string
    """
    encoded = bytes(data).hex()
    return "0x" + encoded if prefix else encoded


def sha3(data: Union[bytes, bytearray]) -> bytes:
    """
    Keccak-256 digest of ``data``.

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    return bytes(Web3.keccak(bytes(data)))


def get_nonce(size: int = DEFAULT_NONCE_SIZE) -> str:
    """
    Generate a random anti-replay nonce.

    Args:
        size: Number of random bytes

    Returns:
        ``size`` random bytes rendered as hex (no prefix)
    """
    return nacl.utils.random(size).hex()


def next_nonce() -> str:
    """Generate a nonce of the default size."""
    return get_nonce()
