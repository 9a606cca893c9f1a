"""
Data models for sweb3-signer.
"""
import re
from enum import IntEnum
from typing import Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

from .crypto.ec_constants import SECP256K1_SCALAR_SIZE
from .proto import Transaction as ProtoTransaction
from .proto import UnverifiedTransaction as ProtoUnverifiedTransaction

SIGNATURE_SIZE = 2 * SECP256K1_SCALAR_SIZE + 1
VALUE_SIZE = 32

_ADDRESS_HEX = re.compile(r"[0-9a-f]{40}")

# Numeric inputs are matched strictly so booleans reach validation as booleans
_Integer = Union[StrictBool, StrictInt, StrictStr]
_Number = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class CryptoScheme(IntEnum):
    """
    Signature scheme tag carried by the envelope.

    These match the protobuf ``Crypto`` enum values.
    """
    SECP = 0


class TransactionParams(BaseModel):
    """
    Caller-supplied transaction fields, before validation.

    Field names follow the JSON shape used by wallets (``validUntilBlock``,
    ``chainId``, ``privateKey``, ``from``); snake_case names are accepted too.
    Unknown fields are rejected. Numeric fields keep the caller's type, so a
    boolean reaches validation unchanged and is rejected there.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    from_address: Optional[str] = Field(None, alias="from")
    private_key: Optional[str] = Field(None, alias="privateKey", repr=False)
    nonce: Optional[str] = None
    quota: Optional[_Number] = None
    to: Optional[str] = None
    value: Optional[_Integer] = None
    data: Optional[Union[bytes, str]] = None
    valid_until_block: Optional[_Number] = Field(None, alias="validUntilBlock")
    chain_id: Optional[_Number] = Field(None, alias="chainId")
    version: Union[StrictBool, StrictInt] = 0


class UnsignedTransaction(BaseModel):
    """Transaction fields returned as-is when no key material is available"""
    model_config = ConfigDict(populate_by_name=True)

    from_address: Optional[str] = Field(None, alias="from")
    nonce: str
    quota: Optional[_Number] = None
    to: str = ""
    value: _Integer = ""
    data: Union[bytes, str] = ""
    valid_until_block: Optional[_Number] = Field(None, alias="validUntilBlock")
    chain_id: Optional[_Number] = Field(None, alias="chainId")
    version: Union[StrictBool, StrictInt] = 0


class Transaction(BaseModel):
    """
    Validated transaction, ready for wire encoding.

    Attributes:
        nonce: Anti-replay token, 1 to 128 characters
        quota: Resource limit, analogous to a gas limit
        to: Recipient address as 40 lower-case hex characters, None for
            contract creation
        value: Amount as a 32-byte big-endian buffer
        data: Call data or contract code
        valid_until_block: Block height after which the transaction expires
        chain_id: Target chain identifier
        version: Wire schema variant
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nonce: str
    quota: int
    to: Optional[str] = None
    value: bytes = b"\x00" * VALUE_SIZE
    data: bytes = b""
    valid_until_block: int = Field(..., alias="validUntilBlock")
    chain_id: int = Field(..., alias="chainId")
    version: int = 0

    @field_validator("to")
    @classmethod
    def _check_to(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _ADDRESS_HEX.fullmatch(v):
            raise ValueError("to must be 40 lower-case hex characters without 0x")
        return v

    @field_validator("value")
    @classmethod
    def _check_value(cls, v: bytes) -> bytes:
        if len(v) != VALUE_SIZE:
            raise ValueError(f"value must be {VALUE_SIZE} bytes, got {len(v)}")
        return v

    @property
    def value_int(self) -> int:
        """The value as an integer."""
        return int.from_bytes(self.value, "big")

    def to_proto(self) -> ProtoTransaction:
        """
        Convert to protobuf Transaction.

        Returns:
            Proto Transaction
        """
        tx = ProtoTransaction()
        tx.nonce = self.nonce
        tx.quota = self.quota
        if self.to:
            tx.to = self.to
        tx.value = self.value
        tx.data = self.data
        tx.valid_until_block = self.valid_until_block
        tx.chain_id = self.chain_id
        tx.version = self.version
        return tx

    @classmethod
    def from_proto(cls, proto_tx: ProtoTransaction) -> "Transaction":
        """
        Create a Transaction instance from a proto Transaction.

        Args:
            proto_tx: Proto Transaction object

        Returns:
            Transaction instance
        """
        return cls(
            nonce=proto_tx.nonce,
            quota=proto_tx.quota,
            to=proto_tx.to if proto_tx.to else None,
            value=proto_tx.value,
            data=proto_tx.data,
            valid_until_block=proto_tx.valid_until_block,
            chain_id=proto_tx.chain_id,
            version=proto_tx.version,
        )


class Signature(BaseModel):
    """
    Recoverable secp256k1 signature.

    Serialized as ``r`` (32 bytes) || ``s`` (32 bytes) || recovery id (1 byte).
    """
    model_config = ConfigDict(frozen=True)

    r: int
    s: int
    recovery_id: int

    @field_validator("r", "s")
    @classmethod
    def _check_component(cls, v: int) -> int:
        if not 0 < v < 2 ** (8 * SECP256K1_SCALAR_SIZE):
            raise ValueError("signature component must fit in 32 bytes")
        return v

    @field_validator("recovery_id")
    @classmethod
    def _check_recovery_id(cls, v: int) -> int:
        if v not in (0, 1):
            raise ValueError("recovery_id must be 0 or 1")
        return v

    def to_bytes(self) -> bytes:
        """
        Serialize to the 65-byte wire form.

        ``r`` and ``s`` are left-padded with zero bytes to 32 bytes each.
        """
        return (
            self.r.to_bytes(SECP256K1_SCALAR_SIZE, "big")
            + self.s.to_bytes(SECP256K1_SCALAR_SIZE, "big")
            + bytes([self.recovery_id])
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Signature":
        """
        Parse the 65-byte wire form.

        Raises:
            ValueError: If ``data`` is not exactly 65 bytes
        """
        if len(data) != SIGNATURE_SIZE:
            raise ValueError(f"Signature must be {SIGNATURE_SIZE} bytes, got {len(data)}")
        return cls(
            r=int.from_bytes(data[:SECP256K1_SCALAR_SIZE], "big"),
            s=int.from_bytes(data[SECP256K1_SCALAR_SIZE:2 * SECP256K1_SCALAR_SIZE], "big"),
            recovery_id=data[-1],
        )


class Sender(BaseModel):
    """Signer identity recovered from a signed envelope"""
    public_key: str = Field(..., alias="publicKey")
    address: str

    model_config = ConfigDict(populate_by_name=True)


class UnverifiedTransaction(BaseModel):
    """
    Signed envelope: a transaction, its signature scheme and signature.

    ``sender`` is only filled in when decoding.
    """
    model_config = ConfigDict(frozen=True)

    transaction: Transaction
    crypto: CryptoScheme = CryptoScheme.SECP
    signature: bytes
    sender: Optional[Sender] = None

    def to_proto(self) -> ProtoUnverifiedTransaction:
        """
        Convert to protobuf UnverifiedTransaction.

        Returns:
            Proto UnverifiedTransaction
        """
        envelope = ProtoUnverifiedTransaction()
        envelope.transaction.CopyFrom(self.transaction.to_proto())
        envelope.crypto = int(self.crypto)
        envelope.signature = self.signature
        return envelope
