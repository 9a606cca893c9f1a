"""
sign - build and sign a transaction envelope.
"""
import logging
from typing import Any, Mapping, Optional, Union

from eth_account import Account

from .config import DEFAULT_CONFIG, SignerConfig
from .crypto import Secp256k1Signer
from .encoding import assemble_envelope, encode_transaction
from .models import CryptoScheme, TransactionParams, UnsignedTransaction
from .utils import get_nonce, sha3
from .validation import validate_transaction

logger = logging.getLogger(__name__)


def _to_params(params: Union[TransactionParams, Mapping[str, Any]]) -> TransactionParams:
    if isinstance(params, TransactionParams):
        return params
    return TransactionParams.model_validate(dict(params))


def _unsigned_preview(params: TransactionParams, nonce: str) -> UnsignedTransaction:
    return UnsignedTransaction(
        from_address=params.from_address,
        nonce=nonce,
        quota=params.quota,
        to=params.to or "",
        value=params.value if params.value is not None else "",
        data=params.data if params.data is not None else "",
        valid_until_block=params.valid_until_block,
        chain_id=params.chain_id,
        version=params.version,
    )


def sign(
    params: Union[TransactionParams, Mapping[str, Any]],
    external_key: Optional[str] = None,
    *,
    config: SignerConfig = DEFAULT_CONFIG,
) -> Union[str, UnsignedTransaction]:
    """
    Validate, encode and sign a transaction.

    Args:
        params: Transaction fields, as ``TransactionParams`` or a mapping
            using the same keys (``validUntilBlock``, ``chainId``, ...)
        external_key: Private key to use instead of ``params.private_key``
        config: Limits and curve parameters

    Returns:
        Hex of the signed ``UnverifiedTransaction`` (no prefix), or an
        ``UnsignedTransaction`` preview when no key material is given

    Raises:
        SignerError: The subclass matching the first invalid field or key
        pydantic.ValidationError: If ``params`` has unknown fields or values
            of the wrong type
    """
    params = _to_params(params)

    key = external_key or params.private_key
    if not key:
        logger.warning("No private key found, returning unsigned transaction")
        nonce = params.nonce if params.nonce is not None else get_nonce(config.nonce_size)
        return _unsigned_preview(params, nonce)

    tx = validate_transaction(params, config)

    signer = Secp256k1Signer(config.curve)
    private_key = signer.load_private_key(key)

    if params.from_address:
        address = Account.from_key(private_key.to_bytes()).address
        if address.lower() != params.from_address.lower():
            logger.warning(
                "Transaction 'from' %s does not match signing key address %s",
                params.from_address,
                address,
            )

    digest = sha3(encode_transaction(tx))
    signature = signer.sign_digest(digest, private_key)
    logger.debug("Signed transaction digest 0x%s…", digest.hex()[:8])

    return assemble_envelope(tx, signature, CryptoScheme.SECP)
