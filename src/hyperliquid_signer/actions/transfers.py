"""
User-signed action builders.

Each builder returns the action together with the ``PrimaryType`` it is
signed as. The implicit ``hyperliquidChain`` and ``signatureChainId`` fields
are added at signing time, not here.
"""

import json
from decimal import Decimal
from typing import Iterable, Optional, Tuple, Union

from ..signing.sign_types import PrimaryType
from ..utils import normalize_address
from ..wire.numeric import to_wire_string
from ..wire.values import Action

Amount = Union[Decimal, float, str, int]
UserSignedAction = Tuple[Action, PrimaryType]


def usd_send_action(destination: str, amount: Amount, time: int) -> UserSignedAction:
    action = (
        Action()
        .set("type", "usdSend")
        .set("destination", normalize_address(destination))
        .set("amount", to_wire_string(amount))
        .set("time", time)
    )
    return action, PrimaryType.USD_SEND


def spot_send_action(destination: str, token: str, amount: Amount, time: int) -> UserSignedAction:
    """``token`` is the ``NAME:0x<token id>`` spot token identifier."""
    action = (
        Action()
        .set("type", "spotSend")
        .set("destination", normalize_address(destination))
        .set("token", token)
        .set("amount", to_wire_string(amount))
        .set("time", time)
    )
    return action, PrimaryType.SPOT_SEND


def withdraw_action(destination: str, amount: Amount, time: int) -> UserSignedAction:
    action = (
        Action()
        .set("type", "withdraw3")
        .set("destination", normalize_address(destination))
        .set("amount", to_wire_string(amount))
        .set("time", time)
    )
    return action, PrimaryType.WITHDRAW


def usd_class_transfer_action(
    amount: Amount,
    to_perp: bool,
    nonce: int,
    vault_address: Optional[str] = None,
) -> UserSignedAction:
    """
    Move USD between the spot and perp balances.

    When acting for a sub-account or vault its address travels inside the
    amount string (``"<amount> subaccount:<address>"``) since user-signed
    actions have no vault qualifier.
    """
    amount_text = to_wire_string(amount)
    if vault_address is not None:
        amount_text += f" subaccount:{normalize_address(vault_address)}"
    action = (
        Action()
        .set("type", "usdClassTransfer")
        .set("amount", amount_text)
        .set("toPerp", to_perp)
        .set("nonce", nonce)
    )
    return action, PrimaryType.USD_CLASS_TRANSFER


def send_asset_action(
    destination: str,
    source_dex: str,
    destination_dex: str,
    token: str,
    amount: Amount,
    nonce: int,
    vault_address: Optional[str] = None,
) -> UserSignedAction:
    action = (
        Action()
        .set("type", "sendAsset")
        .set("destination", normalize_address(destination))
        .set("sourceDex", source_dex)
        .set("destinationDex", destination_dex)
        .set("token", token)
        .set("amount", to_wire_string(amount))
        .set("fromSubAccount", normalize_address(vault_address) if vault_address else "")
        .set("nonce", nonce)
    )
    return action, PrimaryType.SEND_ASSET


def token_delegate_action(validator: str, wei: int, is_undelegate: bool, nonce: int) -> UserSignedAction:
    action = (
        Action()
        .set("type", "tokenDelegate")
        .set("validator", normalize_address(validator))
        .set("wei", wei)
        .set("isUndelegate", is_undelegate)
        .set("nonce", nonce)
    )
    return action, PrimaryType.TOKEN_DELEGATE


def approve_agent_action(agent_address: str, nonce: int, agent_name: Optional[str] = None) -> UserSignedAction:
    """An unnamed agent is signed with an empty ``agentName``; the posted body omits it."""
    action = (
        Action()
        .set("type", "approveAgent")
        .set("agentAddress", normalize_address(agent_address))
        .set("agentName", agent_name or "")
        .set("nonce", nonce)
    )
    return action, PrimaryType.APPROVE_AGENT


def approve_builder_fee_action(builder: str, max_fee_rate: str, nonce: int) -> UserSignedAction:
    """``max_fee_rate`` is a percentage string such as ``"0.001%"``."""
    action = (
        Action()
        .set("type", "approveBuilderFee")
        .set("maxFeeRate", max_fee_rate)
        .set("builder", normalize_address(builder))
        .set("nonce", nonce)
    )
    return action, PrimaryType.APPROVE_BUILDER_FEE


def convert_to_multi_sig_user_action(
    authorized_users: Iterable[str],
    threshold: int,
    nonce: int,
) -> UserSignedAction:
    """
    Turn the signing account into a multi-sig user.

    The signer set is embedded as a JSON string with sorted, lowercase
    addresses so every co-signer derives the same text.
    """
    users = sorted(normalize_address(user) for user in authorized_users)
    signers = json.dumps({"authorizedUsers": users, "threshold": threshold})
    action = (
        Action()
        .set("type", "convertToMultiSigUser")
        .set("signers", signers)
        .set("nonce", nonce)
    )
    return action, PrimaryType.CONVERT_TO_MULTI_SIG_USER


def user_dex_abstraction_action(user: str, enabled: bool, nonce: int) -> UserSignedAction:
    action = (
        Action()
        .set("type", "userDexAbstraction")
        .set("user", normalize_address(user))
        .set("enabled", enabled)
        .set("nonce", nonce)
    )
    return action, PrimaryType.USER_DEX_ABSTRACTION
