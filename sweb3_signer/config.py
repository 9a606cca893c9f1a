"""
Signer configuration.
"""
from dataclasses import dataclass, field

from .crypto.ec_constants import SECP256K1, CurveContext

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class SignerConfig:
    """
    Immutable limits and parameters applied while building a transaction.

    Attributes:
        nonce_size: Number of random bytes in a generated nonce
        max_nonce_length: Maximum nonce length in characters
        max_value_bytes: Maximum width of the value before padding
        curve: Curve parameters used for signing
    """
    nonce_size: int = 5
    max_nonce_length: int = 128
    max_value_bytes: int = 16
    curve: CurveContext = field(default=SECP256K1)

    @property
    def max_value(self) -> int:
        """Largest value accepted, i.e. ``max_value_bytes`` of 0xff."""
        return (1 << (8 * self.max_value_bytes)) - 1


DEFAULT_CONFIG = SignerConfig()
