"""
unsign - decode a signed envelope back into its fields.
"""
import logging

from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeyValidationError
from pydantic import ValidationError

from .crypto import default_signer
from .encoding import decode_envelope
from .exceptions import InvalidEnvelopeError
from .models import (
    CryptoScheme,
    Sender,
    Signature,
    Transaction,
    UnverifiedTransaction,
)
from .utils import hex_to_bytes, sha3

logger = logging.getLogger(__name__)


def unsign(hex_tx: str) -> UnverifiedTransaction:
    """
    Decode a signed transaction and recover its sender.

    Args:
        hex_tx: Hex of a serialized ``UnverifiedTransaction``, with or
            without ``0x`` prefix

    Returns:
        The decoded envelope, with ``sender`` set to the recovered public
        key and checksum address

    Raises:
        InvalidEnvelopeError: If the input is not a well-formed signed
            transaction
    """
    try:
        raw = hex_to_bytes(hex_tx)
    except ValueError as e:
        raise InvalidEnvelopeError(f"Signed transaction must be hex: {e}")

    envelope = decode_envelope(raw)
    try:
        transaction = Transaction.from_proto(envelope.transaction)
        signature = Signature.from_bytes(envelope.signature)
    except (ValidationError, ValueError) as e:
        raise InvalidEnvelopeError(f"Malformed signed transaction: {e}")

    digest = sha3(envelope.transaction.SerializeToString(deterministic=True))
    try:
        public_key = default_signer.recover_public_key(digest, signature)
    except (BadSignature, KeyValidationError) as e:
        raise InvalidEnvelopeError(f"Failed to recover sender: {e}")

    sender = Sender(
        public_key=public_key.to_hex(),
        address=public_key.to_checksum_address(),
    )
    logger.debug("Recovered sender %s…", sender.address[:10])

    return UnverifiedTransaction(
        transaction=transaction,
        crypto=CryptoScheme(envelope.crypto),
        signature=bytes(envelope.signature),
        sender=sender,
    )
