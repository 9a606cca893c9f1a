"""
Tests for decoding signed envelopes.
"""
import pytest

from sweb3_signer import CryptoScheme, ErrorKind, InvalidEnvelopeError, unsign
from sweb3_signer.crypto import default_signer
from sweb3_signer.models import SIGNATURE_SIZE, Transaction
from sweb3_signer.proto import Transaction as ProtoTransaction
from sweb3_signer.proto import UnverifiedTransaction as ProtoUnverifiedTransaction
from sweb3_signer.utils import sha3
from conftest import TEST_CHAIN_ID, TEST_PRIV_KEY, TEST_QUOTA, TEST_TO, TEST_VALID_UNTIL_BLOCK


def test_recovers_transaction_fields(signed_hex):
    decoded = unsign(signed_hex)
    tx = decoded.transaction

    assert tx.nonce == "test-nonce"
    assert tx.quota == TEST_QUOTA
    assert tx.to == TEST_TO[2:]
    assert tx.value_int == 100
    assert tx.data == b"\xde\xad\xbe\xef"
    assert tx.valid_until_block == TEST_VALID_UNTIL_BLOCK
    assert tx.chain_id == TEST_CHAIN_ID
    assert tx.version == 0


def test_recovers_scheme_signature_and_sender(signed_hex, account):
    decoded = unsign(signed_hex)

    assert decoded.crypto == CryptoScheme.SECP
    assert len(decoded.signature) == SIGNATURE_SIZE
    assert decoded.signature[-1] in (0, 1)
    assert decoded.sender.address == account.address
    assert decoded.sender.public_key.startswith("0x")
    assert len(decoded.sender.public_key) == 2 + 128


def test_accepts_prefixed_hex(signed_hex):
    assert unsign("0x" + signed_hex) == unsign(signed_hex)


def test_re_encoding_reproduces_input(signed_hex):
    decoded = unsign(signed_hex)
    reencoded = decoded.model_copy(update={"sender": None}).to_proto()
    assert reencoded.SerializeToString(deterministic=True).hex() == signed_hex


def test_sender_dump_uses_wire_names(signed_hex):
    dumped = unsign(signed_hex).sender.model_dump(by_alias=True)
    assert set(dumped) == {"publicKey", "address"}


@pytest.mark.parametrize("bad_input", ["zz", "0x0g", "ffff"])
def test_malformed_input(bad_input):
    with pytest.raises(InvalidEnvelopeError) as exc_info:
        unsign(bad_input)
    assert exc_info.value.kind == ErrorKind.INVALID_ENVELOPE


def test_zero_signature_rejected():
    envelope = ProtoUnverifiedTransaction(signature=b"\x00" * SIGNATURE_SIZE)
    envelope.transaction.CopyFrom(
        Transaction(nonce="n", quota=1, valid_until_block=1, chain_id=1).to_proto()
    )
    with pytest.raises(InvalidEnvelopeError, match="Malformed signed transaction"):
        unsign(envelope.SerializeToString().hex())


@pytest.mark.parametrize("fields", [
    {"to": TEST_TO},
    {"value": (100).to_bytes(8, "big")},
])
def test_signed_but_non_normalized_transaction_rejected(fields):
    proto_tx = ProtoTransaction(nonce="n", quota=1, valid_until_block=1, chain_id=1, **fields)
    if "value" not in fields:
        proto_tx.value = b"\x00" * 32
    digest = sha3(proto_tx.SerializeToString(deterministic=True))
    signature = default_signer.sign_digest(digest, default_signer.load_private_key(TEST_PRIV_KEY))

    envelope = ProtoUnverifiedTransaction(signature=signature.to_bytes())
    envelope.transaction.CopyFrom(proto_tx)
    with pytest.raises(InvalidEnvelopeError, match="Malformed signed transaction"):
        unsign(envelope.SerializeToString(deterministic=True).hex())
