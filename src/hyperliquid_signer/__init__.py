from .engine.exceptions import (
    HyperliquidSignerError,
    UnsupportedValueError,
    InvalidAddressError,
    PrecisionLossError,
    SigningError,
    InvalidSignatureEncodingError,
    ConfigurationError,
)
from .wire import Action, encode, to_wire_string, to_scaled_integer, to_int_for_hashing, to_usd_int
from .schemas import Signature
from .signing import (
    EIP712Domain,
    TypedDataDocument,
    L1_DOMAIN,
    USER_SIGNED_DOMAIN,
    PrimaryType,
    action_hash,
    RawHashSigner,
    TypedDataSigner,
    PrivateKeySigner,
    LocalTypedDataSigner,
    RemoteTypedDataSigner,
)
from .engine.pipeline import (
    ActionCategory,
    hash_and_maybe_render_typed_data,
    sign_document,
    sign_l1_action,
    sign_user_signed_action,
    sign_multi_sig_action,
)
from .engine.payloads import build_exchange_payload
from .utils import logger, setup_logger

__all__ = [
    "HyperliquidSignerError",
    "UnsupportedValueError",
    "InvalidAddressError",
    "PrecisionLossError",
    "SigningError",
    "InvalidSignatureEncodingError",
    "ConfigurationError",
    "Action",
    "encode",
    "to_wire_string",
    "to_scaled_integer",
    "to_int_for_hashing",
    "to_usd_int",
    "Signature",
    "EIP712Domain",
    "TypedDataDocument",
    "L1_DOMAIN",
    "USER_SIGNED_DOMAIN",
    "PrimaryType",
    "action_hash",
    "RawHashSigner",
    "TypedDataSigner",
    "PrivateKeySigner",
    "LocalTypedDataSigner",
    "RemoteTypedDataSigner",
    "ActionCategory",
    "hash_and_maybe_render_typed_data",
    "sign_document",
    "sign_l1_action",
    "sign_user_signed_action",
    "sign_multi_sig_action",
    "build_exchange_payload",
    "logger",
    "setup_logger",
]
