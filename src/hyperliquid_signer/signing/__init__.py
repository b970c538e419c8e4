from .eip712 import TypedField, encode_type, type_hash, encode_field, struct_hash, domain_separator, final_hash
from .standards import EIP712Domain, TypedDataDocument, L1_DOMAIN, USER_SIGNED_DOMAIN
from .sign_types import PrimaryType
from .action_hash import action_hash
from .typed_data import AGENT_FIELDS, l1_typed_data, user_signed_message, user_signed_typed_data
from .signers import RawHashSigner, TypedDataSigner, PrivateKeySigner, LocalTypedDataSigner
from .remote import RemoteTypedDataSigner

__all__ = [
    "TypedField",
    "encode_type",
    "type_hash",
    "encode_field",
    "struct_hash",
    "domain_separator",
    "final_hash",
    "EIP712Domain",
    "TypedDataDocument",
    "L1_DOMAIN",
    "USER_SIGNED_DOMAIN",
    "PrimaryType",
    "action_hash",
    "AGENT_FIELDS",
    "l1_typed_data",
    "user_signed_message",
    "user_signed_typed_data",
    "RawHashSigner",
    "TypedDataSigner",
    "PrivateKeySigner",
    "LocalTypedDataSigner",
    "RemoteTypedDataSigner",
]
