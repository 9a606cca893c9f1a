"""
Field validation and normalization for transactions.

Each step either returns the normalized value for one field or raises the
``SignerError`` subclass for that field. ``validate_transaction`` runs them
in wire order and builds a ``Transaction``.
"""
import logging
import math
from typing import Optional, Union

from web3 import Web3

from .config import DEFAULT_CONFIG, UINT32_MAX, UINT64_MAX, SignerConfig
from .exceptions import (
    InvalidAddressError,
    InvalidDataError,
    InvalidNonceError,
    InvalidQuotaError,
    InvalidValueError,
    MissingChainIdError,
    MissingExpiryError,
    UnsupportedVersionError,
)
from .models import VALUE_SIZE, Transaction, TransactionParams
from .utils import get_nonce, hex_to_bytes, strip_hex_prefix

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = (0,)


def _as_integer(value: Union[int, float, str, None]) -> Optional[int]:
    """Return ``value`` as an int, or None if it does not denote a finite integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            if text[:2] in ("0x", "0X"):
                return int(text[2:], 16)
            return int(text, 10)
        except ValueError:
            return None
    return None


def resolve_nonce(nonce: Optional[str], config: SignerConfig = DEFAULT_CONFIG) -> str:
    """
    Return the caller's nonce, or a freshly generated one if absent.

    Raises:
        InvalidNonceError: If the nonce is empty or too long
    """
    if nonce is None:
        return get_nonce(config.nonce_size)
    if not nonce:
        raise InvalidNonceError("Nonce should not be empty", field="nonce")
    if len(nonce) > config.max_nonce_length:
        raise InvalidNonceError(
            f"Nonce should be random string with max length of {config.max_nonce_length}",
            field="nonce",
        )
    return nonce


def validate_quota(quota: Union[int, float, str, None]) -> int:
    """
    Raises:
        InvalidQuotaError: If quota is missing, not an integer, or not in (0, 2**64)
    """
    # Quota must be a number; numeric strings are not accepted
    parsed = None if isinstance(quota, str) else _as_integer(quota)
    if parsed is None or parsed <= 0:
        raise InvalidQuotaError("Quota should be larger than 0", field="quota")
    if parsed > UINT64_MAX:
        raise InvalidQuotaError("Quota should fit in an unsigned 64-bit integer", field="quota")
    return parsed


def normalize_value(value: Union[int, str, None], config: SignerConfig = DEFAULT_CONFIG) -> bytes:
    """
    Convert a value to its fixed-width big-endian buffer.

    Args:
        value: Non-negative integer or hex string (``0x`` optional); None or
            empty means zero
        config: Limits to apply

    Returns:
        ``VALUE_SIZE`` bytes, right-aligned

    Raises:
        InvalidValueError: If the value is negative, malformed or exceeds
            ``config.max_value_bytes``
    """
    if value is None or value == "":
        raw = b""
    elif isinstance(value, bool):
        raise InvalidValueError("Value should be an integer or hex string", field="value")
    elif isinstance(value, int):
        if value < 0:
            raise InvalidValueError("Value should not be negative", field="value")
        raw = value.to_bytes((value.bit_length() + 7) // 8, "big")
    else:
        text = value.strip()
        if text.startswith("-"):
            raise InvalidValueError("Value should not be negative", field="value")
        try:
            raw = hex_to_bytes(text)
        except ValueError:
            raise InvalidValueError(f"Value should be a hex string, got {value!r}", field="value")

    if len(raw) > config.max_value_bytes:
        raise InvalidValueError(
            f"Value should not be larger than 0x{'f' * 2 * config.max_value_bytes}",
            field="value",
        )
    return raw.rjust(VALUE_SIZE, b"\x00")


def normalize_to(to: Optional[str]) -> Optional[str]:
    """
    Validate a recipient address and return it lower-case without ``0x``.

    Raises:
        InvalidAddressError: If the address is not a valid 20-byte address
    """
    if not to:
        return None
    if not Web3.is_address(to):
        raise InvalidAddressError(f"Invalid to address: {to}", field="to")
    return strip_hex_prefix(to).lower()


def validate_valid_until_block(valid_until_block: Union[int, float, str, None]) -> int:
    """
    Raises:
        MissingExpiryError: If the expiry is missing or not an unsigned 64-bit integer
    """
    parsed = _as_integer(valid_until_block)
    if parsed is None:
        raise MissingExpiryError("ValidUntilBlock should be set", field="validUntilBlock")
    if not 0 <= parsed <= UINT64_MAX:
        raise MissingExpiryError(
            "ValidUntilBlock should be an unsigned 64-bit integer",
            field="validUntilBlock",
        )
    return parsed


def validate_chain_id(chain_id: Union[int, float, str, None]) -> int:
    """
    Raises:
        MissingChainIdError: If the chain id is missing or not an unsigned 32-bit integer
    """
    if chain_id is None:
        raise MissingChainIdError("Chain Id should be set", field="chainId")
    parsed = _as_integer(chain_id)
    if parsed is None or not 0 <= parsed <= UINT32_MAX:
        raise MissingChainIdError(
            f"Chain Id should be an unsigned 32-bit integer, got {chain_id!r}",
            field="chainId",
        )
    return parsed


def normalize_data(data: Union[bytes, str, None]) -> bytes:
    """
    Raises:
        InvalidDataError: If ``data`` is text that is not valid hex
    """
    if data is None:
        return b""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    try:
        return hex_to_bytes(data)
    except ValueError:
        raise InvalidDataError("Data should be a hex string", field="data")


def validate_version(version: int) -> int:
    """
    Raises:
        UnsupportedVersionError: For any version other than 0
    """
    if isinstance(version, bool) or version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(
            f"Transaction version {version} is not supported",
            field="version",
        )
    return version


def validate_transaction(
    params: TransactionParams,
    config: SignerConfig = DEFAULT_CONFIG,
) -> Transaction:
    """
    Validate caller fields and build a normalized Transaction.

    Args:
        params: Caller-supplied fields
        config: Limits to apply

    Returns:
        Normalized Transaction

    Raises:
        SignerError: The subclass matching the first invalid field
    """
    tx = Transaction(
        nonce=resolve_nonce(params.nonce, config),
        quota=validate_quota(params.quota),
        value=normalize_value(params.value, config),
        to=normalize_to(params.to),
        valid_until_block=validate_valid_until_block(params.valid_until_block),
        chain_id=validate_chain_id(params.chain_id),
        data=normalize_data(params.data),
        version=validate_version(params.version),
    )
    logger.debug("Validated transaction with nonce %s", tx.nonce)
    return tx
