"""
Protocol buffer definitions for the transaction wire format.

``blockchain_pb2`` is generated from ``blockchain.proto`` in this directory;
regenerate it after editing the schema with::

    protoc --python_out=. blockchain.proto
"""
from .blockchain_pb2 import (
    Crypto,
    SECP,
    Transaction,
    UnverifiedTransaction,
)

__all__ = [
    'Crypto',
    'SECP',
    'Transaction',
    'UnverifiedTransaction',
]
