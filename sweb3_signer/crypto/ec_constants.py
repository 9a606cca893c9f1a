"""
Constants for elliptic curve cryptography.
"""
from dataclasses import dataclass

# SECP256K1 constants
# Order of the SECP256K1 elliptic curve (N value)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Width in bytes of a private scalar and of each signature component
SECP256K1_SCALAR_SIZE = 32


@dataclass(frozen=True)
class CurveContext:
    """
    Immutable curve parameters used by the signer.

    Attributes:
        name: Curve name
        order: Order of the base point (n)
        scalar_size: Width in bytes of private keys and of r/s
    """
    name: str
    order: int
    scalar_size: int = SECP256K1_SCALAR_SIZE

    @property
    def half_order(self) -> int:
        """Largest s value accepted as canonical (low-s)."""
        return self.order // 2

    def is_valid_scalar(self, value: int) -> bool:
        return 1 <= value < self.order


SECP256K1 = CurveContext(name="secp256k1", order=SECP256K1_N)
