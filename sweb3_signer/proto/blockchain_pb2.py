# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: blockchain.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x10\x62lockchain.proto\x12\nblockchain\"\x92\x01\n\x0bTransaction\x12\n\n\x02to\x18\x01 \x01(\t\x12\r\n\x05nonce\x18\x02 \x01(\t\x12\r\n\x05quota\x18\x03 \x01(\x04\x12\x19\n\x11valid_until_block\x18\x04 \x01(\x04\x12\x0c\n\x04\x64\x61ta\x18\x05 \x01(\x0c\x12\r\n\x05value\x18\x06 \x01(\x0c\x12\x10\n\x08\x63hain_id\x18\x07 \x01(\r\x12\x0f\n\x07version\x18\x08 \x01(\r\"|\n\x15UnverifiedTransaction\x12,\n\x0btransaction\x18\x01 \x01(\x0b\x32\x17.blockchain.Transaction\x12\x11\n\tsignature\x18\x02 \x01(\x0c\x12\"\n\x06\x63rypto\x18\x03 \x01(\x0e\x32\x12.blockchain.Crypto*\x12\n\x06\x43rypto\x12\x08\n\x04SECP\x10\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'blockchain_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _CRYPTO._serialized_start=307
  _CRYPTO._serialized_end=325
  _TRANSACTION._serialized_start=33
  _TRANSACTION._serialized_end=179
  _UNVERIFIEDTRANSACTION._serialized_start=181
  _UNVERIFIEDTRANSACTION._serialized_end=305
# @@protoc_insertion_point(module_scope)
