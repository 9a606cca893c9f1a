"""
Exceptions for the signer.

Every failure carries an ``ErrorKind`` tag so callers can either catch the
specific subclass or match on ``err.kind``.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """
    Error kinds raised while validating, signing or decoding a transaction.
    """
    INVALID_NONCE = "InvalidNonce"
    INVALID_QUOTA = "InvalidQuota"
    INVALID_VALUE = "InvalidValue"
    INVALID_ADDRESS = "InvalidAddress"
    MISSING_EXPIRY = "MissingExpiry"
    MISSING_CHAIN_ID = "MissingChainId"
    INVALID_DATA = "InvalidData"
    INVALID_KEY = "InvalidKey"
    UNSUPPORTED_VERSION = "UnsupportedVersion"
    INVALID_ENVELOPE = "InvalidEnvelope"


class SignerError(ValueError):
    """Base exception for transaction validation and signing errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class InvalidNonceError(SignerError):
    """Raised when the nonce is empty or longer than the allowed maximum."""
    kind = ErrorKind.INVALID_NONCE


class InvalidQuotaError(SignerError):
    """Raised when the quota is missing, not an integer or not positive."""
    kind = ErrorKind.INVALID_QUOTA


class InvalidValueError(SignerError):
    """Raised when the value is negative, malformed or too large."""
    kind = ErrorKind.INVALID_VALUE


class InvalidAddressError(SignerError):
    """Raised when ``to`` is present but is not a valid address."""
    kind = ErrorKind.INVALID_ADDRESS


class MissingExpiryError(SignerError):
    """Raised when ``validUntilBlock`` is missing or not an integer."""
    kind = ErrorKind.MISSING_EXPIRY


class MissingChainIdError(SignerError):
    """Raised when ``chainId`` is missing or out of range."""
    kind = ErrorKind.MISSING_CHAIN_ID


class InvalidDataError(SignerError):
    """Raised when ``data`` is not valid hex."""
    kind = ErrorKind.INVALID_DATA


class InvalidKeyError(SignerError):
    """Raised when the private key is not a valid secp256k1 scalar."""
    kind = ErrorKind.INVALID_KEY


class UnsupportedVersionError(SignerError):
    """Raised for transaction versions other than 0."""
    kind = ErrorKind.UNSUPPORTED_VERSION


class InvalidEnvelopeError(SignerError):
    """Raised when a signed envelope cannot be decoded."""
    kind = ErrorKind.INVALID_ENVELOPE
