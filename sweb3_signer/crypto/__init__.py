"""
Cryptographic primitives for transaction signing.
"""
from .ec_constants import SECP256K1, SECP256K1_N, CurveContext
from .ecdsa import Secp256k1Signer, default_signer

__all__ = [
    'SECP256K1',
    'SECP256K1_N',
    'CurveContext',
    'Secp256k1Signer',
    'default_signer',
]
