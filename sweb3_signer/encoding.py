"""
Wire encoding for transactions and signed envelopes.

Both messages are serialized with protobuf's deterministic mode, so equal
inputs always produce byte-identical output.
"""
import logging

from google.protobuf.message import DecodeError

from .exceptions import InvalidEnvelopeError
from .models import (
    SIGNATURE_SIZE,
    CryptoScheme,
    Signature,
    Transaction,
    UnverifiedTransaction,
)
from .proto import UnverifiedTransaction as ProtoUnverifiedTransaction
from .utils import bytes_to_hex

logger = logging.getLogger(__name__)


def encode_transaction(tx: Transaction) -> bytes:
    """
    Serialize a validated transaction.

    Args:
        tx: Normalized transaction

    Returns:
        Protobuf-encoded ``Transaction`` bytes
    """
    return tx.to_proto().SerializeToString(deterministic=True)


def assemble_envelope(
    tx: Transaction,
    signature: Signature,
    crypto: CryptoScheme = CryptoScheme.SECP,
) -> str:
    """
    Build and serialize the signed envelope.

    Args:
        tx: The signed transaction
        signature: Signature over the keccak digest of ``encode_transaction(tx)``
        crypto: Signature scheme tag

    Returns:
        Lower-case hex of the serialized ``UnverifiedTransaction``, no prefix
    """
    envelope = UnverifiedTransaction(
        transaction=tx,
        crypto=crypto,
        signature=signature.to_bytes(),
    )
    serialized = envelope.to_proto().SerializeToString(deterministic=True)
    logger.debug("Assembled envelope of %d bytes", len(serialized))
    return bytes_to_hex(serialized, prefix=False)


def decode_envelope(raw: bytes) -> ProtoUnverifiedTransaction:
    """
    Parse serialized envelope bytes.

    Args:
        raw: Serialized ``UnverifiedTransaction``

    Returns:
        Proto UnverifiedTransaction

    Raises:
        InvalidEnvelopeError: If the bytes do not parse, the transaction is
            missing, the scheme is unknown or the signature is not 65 bytes
    """
    envelope = ProtoUnverifiedTransaction()
    try:
        envelope.ParseFromString(raw)
    except DecodeError as e:
        raise InvalidEnvelopeError(f"Failed to decode envelope: {e}")

    if not envelope.HasField("transaction"):
        raise InvalidEnvelopeError("Envelope does not contain a transaction")
    try:
        CryptoScheme(envelope.crypto)
    except ValueError:
        raise InvalidEnvelopeError(f"Unknown signature scheme: {envelope.crypto}")
    if len(envelope.signature) != SIGNATURE_SIZE:
        raise InvalidEnvelopeError(
            f"Signature must be {SIGNATURE_SIZE} bytes, got {len(envelope.signature)}"
        )
    return envelope
