"""
Account, sub-account and validator action builders (L1 category).
"""

from decimal import Decimal
from typing import Optional, Union

from ..utils import normalize_address
from ..wire.numeric import to_usd_int, to_wire_string
from ..wire.values import Action, Null


def _nullable(value):
    return Null() if value is None else value


def update_leverage_action(asset: int, leverage: int, is_cross: bool = True) -> Action:
    return (
        Action()
        .set("type", "updateLeverage")
        .set("asset", asset)
        .set("isCross", is_cross)
        .set("leverage", leverage)
    )


def update_isolated_margin_action(asset: int, amount: Union[Decimal, float, str, int]) -> Action:
    """Add (positive) or remove (negative) isolated margin, in USD."""
    return (
        Action()
        .set("type", "updateIsolatedMargin")
        .set("asset", asset)
        .set("isBuy", True)
        .set("ntli", to_usd_int(amount))
    )


def set_referrer_action(code: str) -> Action:
    return Action().set("type", "setReferrer").set("code", code)


def create_sub_account_action(name: str) -> Action:
    return Action().set("type", "createSubAccount").set("name", name)


def sub_account_transfer_action(sub_account_user: str, is_deposit: bool, usd: int) -> Action:
    """
    Move perp USD between the master account and a sub-account.

    ``usd`` is already scaled (micro-USD integer).
    """
    return (
        Action()
        .set("type", "subAccountTransfer")
        .set("subAccountUser", normalize_address(sub_account_user))
        .set("isDeposit", is_deposit)
        .set("usd", usd)
    )


def sub_account_spot_transfer_action(
    sub_account_user: str,
    is_deposit: bool,
    token: str,
    amount: Union[Decimal, float, str, int],
) -> Action:
    return (
        Action()
        .set("type", "subAccountSpotTransfer")
        .set("subAccountUser", normalize_address(sub_account_user))
        .set("isDeposit", is_deposit)
        .set("token", token)
        .set("amount", to_wire_string(amount))
    )


def vault_transfer_action(vault_address: str, is_deposit: bool, usd: int) -> Action:
    return (
        Action()
        .set("type", "vaultTransfer")
        .set("vaultAddress", normalize_address(vault_address))
        .set("isDeposit", is_deposit)
        .set("usd", usd)
    )


def use_big_blocks_action(enable: bool) -> Action:
    return Action().set("type", "evmUserModify").set("usingBigBlocks", enable)


def agent_enable_dex_abstraction_action() -> Action:
    return Action().set("type", "agentEnableDexAbstraction")


# Validator actions carry their variant tag as a key with a null payload.

def c_signer_action(jail: bool) -> Action:
    return Action().set("type", "CSignerAction").set("jailSelf" if jail else "unjailSelf", Null())


def c_validator_unregister_action() -> Action:
    return Action().set("type", "CValidatorAction").set("unregister", Null())


def c_validator_register_action(
    node_ip: str,
    name: str,
    description: str,
    delegations_disabled: bool,
    commission_bps: int,
    signer: str,
    unjailed: bool,
    initial_wei: int,
) -> Action:
    profile = (
        Action()
        .set("node_ip", Action().set("Ip", node_ip))
        .set("name", name)
        .set("description", description)
        .set("delegations_disabled", delegations_disabled)
        .set("commission_bps", commission_bps)
        .set("signer", normalize_address(signer))
    )
    register = Action().set("profile", profile).set("unjailed", unjailed).set("initial_wei", initial_wei)
    return Action().set("type", "CValidatorAction").set("register", register)


def c_validator_change_profile_action(
    unjailed: bool,
    node_ip: Optional[str] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    disable_delegations: Optional[bool] = None,
    commission_bps: Optional[int] = None,
    signer: Optional[str] = None,
) -> Action:
    """
    Update a validator profile.

    Every profile field is always sent; the ones left as ``None`` carry an
    explicit null, which the exchange reads as "unchanged".
    """
    profile = (
        Action()
        .set("node_ip", Null() if node_ip is None else Action().set("Ip", node_ip))
        .set("name", _nullable(name))
        .set("description", _nullable(description))
        .set("unjailed", unjailed)
        .set("disable_delegations", _nullable(disable_delegations))
        .set("commission_bps", _nullable(commission_bps))
        .set("signer", Null() if signer is None else normalize_address(signer))
    )
    return Action().set("type", "CValidatorAction").set("changeProfile", profile)
