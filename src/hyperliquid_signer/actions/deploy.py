"""
Spot and perp deployment action builders (L1 category).

Every deploy action is ``{"type": "spotDeploy" | "perpDeploy", <variant>:
{...}}`` where the single variant key selects the operation. Optional
parameters follow two rules, fixed per variant:

    - ``genesis.noHyperliquidity`` and ``registerHyperliquidity.nSeededLevels``
      are omitted when unset.
    - ``registerAsset.maxGas``, ``registerAsset.schema`` and
      ``schema.oracleUpdater`` are always present and carry an explicit null
      when unset.
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional, Tuple, Union

from ..schemas.deploy import PerpDexSchema
from ..utils import normalize_address
from ..wire.numeric import to_wire_string
from ..wire.values import Action, Null

Price = Union[Decimal, float, str, int]


def _spot_deploy(variant: str, payload: Action) -> Action:
    return Action().set("type", "spotDeploy").set(variant, payload)


def _perp_deploy(variant: str, payload: Action) -> Action:
    return Action().set("type", "perpDeploy").set(variant, payload)


def _sorted_price_pairs(prices: Mapping[str, Price]) -> list:
    return [[name, to_wire_string(prices[name])] for name in sorted(prices)]


# ---------------------------------------------------------------------------
# Spot deploy
# ---------------------------------------------------------------------------

def spot_deploy_register_token_action(
    token_name: str,
    sz_decimals: int,
    wei_decimals: int,
    max_gas: int,
    full_name: str,
) -> Action:
    spec = (
        Action()
        .set("name", token_name)
        .set("szDecimals", sz_decimals)
        .set("weiDecimals", wei_decimals)
    )
    register = Action().set("spec", spec).set("maxGas", max_gas).set("fullName", full_name)
    return _spot_deploy("registerToken2", register)


def spot_deploy_user_genesis_action(
    token: int,
    user_and_wei: Iterable[Tuple[str, str]],
    existing_token_and_wei: Iterable[Tuple[int, str]],
) -> Action:
    """
    Seed initial balances for a token being deployed.

    ``wei`` amounts are decimal strings in the token's smallest unit.
    """
    genesis = (
        Action()
        .set("token", token)
        .set("userAndWei", [[normalize_address(user), wei] for user, wei in user_and_wei])
        .set("existingTokenAndWei", [[existing, wei] for existing, wei in existing_token_and_wei])
    )
    return _spot_deploy("userGenesis", genesis)


def spot_deploy_genesis_action(token: int, max_supply: str, no_hyperliquidity: bool = False) -> Action:
    genesis = Action().set("token", token).set("maxSupply", max_supply)
    if no_hyperliquidity:
        genesis.set("noHyperliquidity", True)
    return _spot_deploy("genesis", genesis)


def spot_deploy_register_spot_action(base_token: int, quote_token: int) -> Action:
    return _spot_deploy("registerSpot", Action().set("tokens", [base_token, quote_token]))


def spot_deploy_register_hyperliquidity_action(
    spot: int,
    start_px: Price,
    order_sz: Price,
    n_orders: int,
    n_seeded_levels: Optional[int] = None,
) -> Action:
    register = (
        Action()
        .set("spot", spot)
        .set("startPx", to_wire_string(start_px))
        .set("orderSz", to_wire_string(order_sz))
        .set("nOrders", n_orders)
    )
    if n_seeded_levels is not None:
        register.set("nSeededLevels", n_seeded_levels)
    return _spot_deploy("registerHyperliquidity", register)


def spot_deploy_set_deployer_trading_fee_share_action(token: int, share: str) -> Action:
    """``share`` is a percentage string such as ``"100%"``."""
    return _spot_deploy("setDeployerTradingFeeShare", Action().set("token", token).set("share", share))


def spot_deploy_freeze_user_action(token: int, user: str, freeze: bool) -> Action:
    freeze_user = (
        Action()
        .set("token", token)
        .set("user", normalize_address(user))
        .set("freeze", freeze)
    )
    return _spot_deploy("freezeUser", freeze_user)


def spot_deploy_enable_freeze_privilege_action(token: int) -> Action:
    return _spot_deploy("enableFreezePrivilege", Action().set("token", token))


def spot_deploy_revoke_freeze_privilege_action(token: int) -> Action:
    return _spot_deploy("revokeFreezePrivilege", Action().set("token", token))


def spot_deploy_enable_quote_token_action(token: int) -> Action:
    return _spot_deploy("enableQuoteToken", Action().set("token", token))


# ---------------------------------------------------------------------------
# Perp deploy
# ---------------------------------------------------------------------------

def perp_deploy_register_asset_action(
    dex: str,
    max_gas: Optional[int],
    coin: str,
    sz_decimals: int,
    oracle_px: Price,
    margin_table_id: int,
    only_isolated: bool,
    schema: Optional[PerpDexSchema] = None,
) -> Action:
    """
    Register a perp asset, creating the dex when ``schema`` is given.

    Args:
        dex: Dex name.
        max_gas: Gas cap for the deploy auction, or ``None`` for null.
        schema: Dex schema, only for the first asset of a new dex.
    """
    asset_request = (
        Action()
        .set("coin", coin)
        .set("szDecimals", sz_decimals)
        .set("oraclePx", to_wire_string(oracle_px))
        .set("marginTableId", margin_table_id)
        .set("onlyIsolated", only_isolated)
    )
    if schema is None:
        schema_wire = Null()
    else:
        schema_wire = (
            Action()
            .set("fullName", schema.full_name)
            .set("collateralToken", schema.collateral_token)
            .set("oracleUpdater", schema.oracle_updater if schema.oracle_updater is not None else Null())
        )
    register = (
        Action()
        .set("maxGas", max_gas if max_gas is not None else Null())
        .set("assetRequest", asset_request)
        .set("dex", dex)
        .set("schema", schema_wire)
    )
    return _perp_deploy("registerAsset", register)


def perp_deploy_set_oracle_action(
    dex: str,
    oracle_pxs: Mapping[str, Price],
    all_mark_pxs: Iterable[Mapping[str, Price]],
    external_perp_pxs: Mapping[str, Price],
) -> Action:
    """
    Push oracle, mark and external prices for a deployed dex.

    Each price map becomes a list of ``[coin, wireString]`` pairs sorted by
    coin name, so the same prices always hash the same way.
    """
    set_oracle = (
        Action()
        .set("dex", dex)
        .set("oraclePxs", _sorted_price_pairs(oracle_pxs))
        .set("markPxs", [_sorted_price_pairs(mark_pxs) for mark_pxs in all_mark_pxs])
        .set("externalPerpPxs", _sorted_price_pairs(external_perp_pxs))
    )
    return _perp_deploy("setOracle", set_oracle)
