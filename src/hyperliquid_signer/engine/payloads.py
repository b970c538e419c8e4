"""
Exchange request bodies.

The transport layer posts ``{action, nonce, signature, vaultAddress,
expiresAfter}``; this module assembles that body from a signed action. It
performs no network I/O.
"""

from typing import Any, Dict, Optional, Union

from ..constants import NO_VAULT_PAYLOAD_ACTION_TYPES
from ..schemas.signatures import Signature
from ..signing.sign_types import PrimaryType
from ..signing.typed_data import user_signed_message
from ..utils import normalize_address
from ..wire.values import Action, Text
from .pipeline import Signer, sign_l1_action, sign_user_signed_action


def build_exchange_payload(
    action: Action,
    nonce: int,
    signature: Signature,
    *,
    vault_address: Optional[str] = None,
    expires_after: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Assemble the JSON body for the exchange endpoint.

    ``vaultAddress`` is always ``None`` for action kinds that were hashed
    without a vault or that carry the sub-account inside the action itself.
    """
    if vault_address is not None and action.action_type not in NO_VAULT_PAYLOAD_ACTION_TYPES:
        vault = normalize_address(vault_address)
    else:
        vault = None
    return {
        "action": action.to_json_value(),
        "nonce": nonce,
        "signature": signature.to_dict(),
        "vaultAddress": vault,
        "expiresAfter": expires_after,
    }


def posted_user_action(action: Action, is_mainnet: bool) -> Action:
    """
    The user-signed action as it is posted.

    Carries the signed implicit fields. An ``approveAgent`` signed with an
    empty ``agentName`` is posted without the key.
    """
    posted = user_signed_message(action, is_mainnet)
    if posted.action_type == "approveAgent" and posted.get("agentName") == Text(""):
        posted.remove("agentName")
    return posted


async def signed_l1_payload(
    signer: Signer,
    action: Action,
    nonce: int,
    *,
    is_mainnet: bool,
    vault_address: Optional[str] = None,
    expires_after: Optional[int] = None,
) -> Dict[str, Any]:
    signature = await sign_l1_action(
        signer,
        action,
        nonce,
        is_mainnet=is_mainnet,
        vault_address=vault_address,
        expires_after=expires_after,
    )
    return build_exchange_payload(
        action,
        nonce,
        signature,
        vault_address=vault_address,
        expires_after=expires_after,
    )


async def signed_user_payload(
    signer: Signer,
    action: Action,
    primary_type: Union[PrimaryType, str],
    nonce: int,
    *,
    is_mainnet: bool,
    vault_address: Optional[str] = None,
    expires_after: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Sign a user-signed action and build its body.

    The posted action includes ``hyperliquidChain`` and ``signatureChainId``
    exactly as they were signed. ``nonce`` must equal the action's own
    ``time``/``nonce`` field.
    """
    signature = await sign_user_signed_action(signer, action, primary_type, is_mainnet=is_mainnet)
    return build_exchange_payload(
        posted_user_action(action, is_mainnet),
        nonce,
        signature,
        vault_address=vault_address,
        expires_after=expires_after,
    )
