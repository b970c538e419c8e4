"""
User-signed transaction kinds and their fixed EIP-712 schemas.

Every schema starts with ``hyperliquidChain``; field order is part of the
type hash and must not change.
"""

from enum import Enum
from typing import Tuple

from .eip712 import TypedField

PRIMARY_TYPE_PREFIX = "HyperliquidTransaction:"

_CHAIN = TypedField("hyperliquidChain", "string")

USD_SEND_SIGN_TYPES = (
    _CHAIN,
    TypedField("destination", "string"),
    TypedField("amount", "string"),
    TypedField("time", "uint64"),
)

SPOT_TRANSFER_SIGN_TYPES = (
    _CHAIN,
    TypedField("destination", "string"),
    TypedField("token", "string"),
    TypedField("amount", "string"),
    TypedField("time", "uint64"),
)

WITHDRAW_SIGN_TYPES = USD_SEND_SIGN_TYPES

USD_CLASS_TRANSFER_SIGN_TYPES = (
    _CHAIN,
    TypedField("amount", "string"),
    TypedField("toPerp", "bool"),
    TypedField("nonce", "uint64"),
)

SEND_ASSET_SIGN_TYPES = (
    _CHAIN,
    TypedField("destination", "string"),
    TypedField("sourceDex", "string"),
    TypedField("destinationDex", "string"),
    TypedField("token", "string"),
    TypedField("amount", "string"),
    TypedField("fromSubAccount", "string"),
    TypedField("nonce", "uint64"),
)

TOKEN_DELEGATE_SIGN_TYPES = (
    _CHAIN,
    TypedField("validator", "address"),
    TypedField("wei", "uint64"),
    TypedField("isUndelegate", "bool"),
    TypedField("nonce", "uint64"),
)

APPROVE_AGENT_SIGN_TYPES = (
    _CHAIN,
    TypedField("agentAddress", "address"),
    TypedField("agentName", "string"),
    TypedField("nonce", "uint64"),
)

APPROVE_BUILDER_FEE_SIGN_TYPES = (
    _CHAIN,
    TypedField("maxFeeRate", "string"),
    TypedField("builder", "address"),
    TypedField("nonce", "uint64"),
)

CONVERT_TO_MULTI_SIG_USER_SIGN_TYPES = (
    _CHAIN,
    TypedField("signers", "string"),
    TypedField("nonce", "uint64"),
)

MULTI_SIG_ENVELOPE_SIGN_TYPES = (
    _CHAIN,
    TypedField("multiSigActionHash", "bytes32"),
    TypedField("nonce", "uint64"),
)

USER_DEX_ABSTRACTION_SIGN_TYPES = (
    _CHAIN,
    TypedField("user", "address"),
    TypedField("enabled", "bool"),
    TypedField("nonce", "uint64"),
)


class PrimaryType(str, Enum):
    """
    Closed set of user-signed transaction kinds.

    The enum value is the full EIP-712 primary type name.
    """
    USD_SEND = PRIMARY_TYPE_PREFIX + "UsdSend"
    SPOT_SEND = PRIMARY_TYPE_PREFIX + "SpotSend"
    WITHDRAW = PRIMARY_TYPE_PREFIX + "Withdraw"
    USD_CLASS_TRANSFER = PRIMARY_TYPE_PREFIX + "UsdClassTransfer"
    SEND_ASSET = PRIMARY_TYPE_PREFIX + "SendAsset"
    TOKEN_DELEGATE = PRIMARY_TYPE_PREFIX + "TokenDelegate"
    APPROVE_AGENT = PRIMARY_TYPE_PREFIX + "ApproveAgent"
    APPROVE_BUILDER_FEE = PRIMARY_TYPE_PREFIX + "ApproveBuilderFee"
    CONVERT_TO_MULTI_SIG_USER = PRIMARY_TYPE_PREFIX + "ConvertToMultiSigUser"
    SEND_MULTI_SIG = PRIMARY_TYPE_PREFIX + "SendMultiSig"
    USER_DEX_ABSTRACTION = PRIMARY_TYPE_PREFIX + "UserDexAbstraction"

    @property
    def fields(self) -> Tuple[TypedField, ...]:
        return _SCHEMAS[self]


_SCHEMAS = {
    PrimaryType.USD_SEND: USD_SEND_SIGN_TYPES,
    PrimaryType.SPOT_SEND: SPOT_TRANSFER_SIGN_TYPES,
    PrimaryType.WITHDRAW: WITHDRAW_SIGN_TYPES,
    PrimaryType.USD_CLASS_TRANSFER: USD_CLASS_TRANSFER_SIGN_TYPES,
    PrimaryType.SEND_ASSET: SEND_ASSET_SIGN_TYPES,
    PrimaryType.TOKEN_DELEGATE: TOKEN_DELEGATE_SIGN_TYPES,
    PrimaryType.APPROVE_AGENT: APPROVE_AGENT_SIGN_TYPES,
    PrimaryType.APPROVE_BUILDER_FEE: APPROVE_BUILDER_FEE_SIGN_TYPES,
    PrimaryType.CONVERT_TO_MULTI_SIG_USER: CONVERT_TO_MULTI_SIG_USER_SIGN_TYPES,
    PrimaryType.SEND_MULTI_SIG: MULTI_SIG_ENVELOPE_SIGN_TYPES,
    PrimaryType.USER_DEX_ABSTRACTION: USER_DEX_ABSTRACTION_SIGN_TYPES,
}
