"""
Canonical secp256k1 signing with recovery information.
"""
import logging
from typing import Union

from eth_keys import keys

from ..exceptions import InvalidKeyError
from ..models import Signature
from ..utils import hex_to_bytes, strip_hex_prefix
from .ec_constants import SECP256K1, CurveContext

logger = logging.getLogger(__name__)

DIGEST_SIZE = 32


class Secp256k1Signer:
    """
    Signs 32-byte digests with a secp256k1 private scalar.

    Signatures are always returned in canonical (low-s) form; the recovery
    id is adjusted whenever ``s`` has to be flipped.
    """

    def __init__(self, curve: CurveContext = SECP256K1):
        self.curve = curve

    def load_private_key(self, private_key: Union[str, bytes]) -> keys.PrivateKey:
        """
        Parse a private scalar.

        Args:
            private_key: 32-byte key as hex text (with or without ``0x``)
                or raw bytes

        Returns:
            eth_keys PrivateKey

        Raises:
            InvalidKeyError: If the key is malformed or outside [1, n-1]
        """
        if isinstance(private_key, str):
            digits = strip_hex_prefix(private_key.strip())
            if len(digits) != 2 * self.curve.scalar_size:
                raise InvalidKeyError(
                    f"Private key must be {self.curve.scalar_size} bytes of hex",
                    field="privateKey",
                )
            try:
                key_bytes = hex_to_bytes(digits)
            except ValueError:
                raise InvalidKeyError("Private key must be a hex string", field="privateKey")
        elif isinstance(private_key, (bytes, bytearray)):
            key_bytes = bytes(private_key)
            if len(key_bytes) != self.curve.scalar_size:
                raise InvalidKeyError(
                    f"Private key must be {self.curve.scalar_size} bytes",
                    field="privateKey",
                )
        else:
            raise InvalidKeyError(
                f"Private key must be hex text or bytes, got {type(private_key).__name__}",
                field="privateKey",
            )

        if not self.curve.is_valid_scalar(int.from_bytes(key_bytes, "big")):
            raise InvalidKeyError(
                f"Private key is outside the {self.curve.name} scalar range",
                field="privateKey",
            )
        return keys.PrivateKey(key_bytes)

    def sign_digest(self, digest: bytes, private_key: Union[str, bytes, keys.PrivateKey]) -> Signature:
        """
        Sign a 32-byte digest.

        Args:
            digest: Message digest
            private_key: Key as accepted by ``load_private_key``, or an
                already loaded eth_keys PrivateKey

        Returns:
            Canonical signature with recovery id

        Raises:
            InvalidKeyError: If the key is invalid
            ValueError: If the digest is not 32 bytes
        """
        if len(digest) != DIGEST_SIZE:
            raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
        if not isinstance(private_key, keys.PrivateKey):
            private_key = self.load_private_key(private_key)

        raw = private_key.sign_msg_hash(digest)
        r, s, recovery_id = raw.r, raw.s, raw.v
        if s > self.curve.half_order:
            logger.debug("Normalizing high-s signature to canonical form")
            s = self.curve.order - s
            recovery_id ^= 1
        return Signature(r=r, s=s, recovery_id=recovery_id)

    def recover_public_key(self, digest: bytes, signature: Signature) -> keys.PublicKey:
        """
        Recover the public key that produced ``signature`` over ``digest``.
        """
        recoverable = keys.Signature(vrs=(signature.recovery_id, signature.r, signature.s))
        return recoverable.recover_public_key_from_msg_hash(digest)

    def verify(self, digest: bytes, signature: Signature, public_key: keys.PublicKey) -> bool:
        """
        Check ``signature`` over ``digest`` against ``public_key``.

        Non-canonical (high-s) signatures are rejected.
        """
        if signature.s > self.curve.half_order:
            return False
        recoverable = keys.Signature(vrs=(signature.recovery_id, signature.r, signature.s))
        return public_key.verify_msg_hash(digest, recoverable)


default_signer = Secp256k1Signer()
