"""
Typed-data builders for the two signing categories.

L1 actions (orders, cancels, account settings) are wrapped in the phantom
``Agent`` struct on the L1 domain. User-signed actions (transfers, approvals,
multi-sig envelopes) are hashed as themselves on the user-signed domain,
extended with the chain name and the signature chain id.
"""

from typing import Optional, Sequence, Union

from ..constants import AGENT_PRIMARY_TYPE, SIGNATURE_CHAIN_ID, agent_source, chain_name
from ..wire.values import Action
from .eip712 import TypedField
from .sign_types import PrimaryType
from .standards import L1_DOMAIN, USER_SIGNED_DOMAIN, TypedDataDocument

AGENT_FIELDS = (
    TypedField("source", "string"),
    TypedField("connectionId", "bytes32"),
)

_IMPLICIT_USER_FIELDS = ("hyperliquidChain", "signatureChainId")


def l1_typed_data(connection_id: bytes, is_mainnet: bool) -> TypedDataDocument:
    """
    Wrap an action hash in the phantom agent struct.

    Args:
        connection_id: 32-byte action hash.
        is_mainnet: Selects source ``"a"`` (mainnet) or ``"b"`` (testnet).
    """
    return TypedDataDocument(
        domain=L1_DOMAIN,
        primary_type=AGENT_PRIMARY_TYPE,
        fields=AGENT_FIELDS,
        message={"source": agent_source(is_mainnet), "connectionId": bytes(connection_id)},
    )


def user_signed_message(action: Action, is_mainnet: bool) -> Action:
    """
    Return a copy of ``action`` carrying the implicit user-signed fields.

    ``hyperliquidChain`` always comes first and ``signatureChainId`` last;
    same-named caller entries are replaced rather than kept in place.
    """
    message = Action().set("hyperliquidChain", chain_name(is_mainnet))
    for key, value in action.items():
        if key not in _IMPLICIT_USER_FIELDS:
            message.set(key, value)
    return message.set("signatureChainId", SIGNATURE_CHAIN_ID)


def user_signed_typed_data(
    action: Action,
    primary_type: Union[PrimaryType, str],
    is_mainnet: bool,
    fields: Optional[Sequence[TypedField]] = None,
) -> TypedDataDocument:
    """
    Build the typed-data document for a user-signed action.

    Args:
        action: Caller action, without the implicit fields.
        primary_type: One of ``PrimaryType``.
        is_mainnet: Chain selector for ``hyperliquidChain``.
        fields: Schema override, used by multi-sig inner payloads that add
            signer addresses to the standard schema.
    """
    kind = PrimaryType(primary_type)
    schema = tuple(fields) if fields is not None else kind.fields
    message = user_signed_message(action, is_mainnet)
    return TypedDataDocument(
        domain=USER_SIGNED_DOMAIN,
        primary_type=kind.value,
        fields=schema,
        message=message.to_python(),
    )
