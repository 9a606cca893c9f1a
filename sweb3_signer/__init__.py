"""
sweb3-signer - offline transaction signing for CITA-style chains.
"""
from .version import __version__
from .config import DEFAULT_CONFIG, SignerConfig
from .exceptions import (
    ErrorKind,
    SignerError,
    InvalidNonceError,
    InvalidQuotaError,
    InvalidValueError,
    InvalidAddressError,
    MissingExpiryError,
    MissingChainIdError,
    InvalidDataError,
    InvalidKeyError,
    UnsupportedVersionError,
    InvalidEnvelopeError,
)
from .models import (
    CryptoScheme,
    Sender,
    Signature,
    Transaction,
    TransactionParams,
    UnsignedTransaction,
    UnverifiedTransaction,
)
from .signer import sign
from .unsigner import unsign
from .utils import bytes_to_hex, hex_to_bytes, next_nonce, sha3

__all__ = [
    "sign",
    "unsign",
    "next_nonce",
    "hex_to_bytes",
    "bytes_to_hex",
    "sha3",
    "SignerConfig",
    "DEFAULT_CONFIG",
    "CryptoScheme",
    "Sender",
    "Signature",
    "Transaction",
    "TransactionParams",
    "UnsignedTransaction",
    "UnverifiedTransaction",
    "ErrorKind",
    "SignerError",
    "InvalidNonceError",
    "InvalidQuotaError",
    "InvalidValueError",
    "InvalidAddressError",
    "MissingExpiryError",
    "MissingChainIdError",
    "InvalidDataError",
    "InvalidKeyError",
    "UnsupportedVersionError",
    "InvalidEnvelopeError",
    "__version__",
]
