"""
Spot and perp deployment action tests.

Covers wire layout, the per-variant choice between omitting an unset
parameter and sending an explicit null, and sorted oracle price pairs.

Usage:
    pytest tests/test_actions/test_deploy.py -v
"""

import pytest

from hyperliquid_signer.actions.deploy import (
    perp_deploy_register_asset_action,
    perp_deploy_set_oracle_action,
    spot_deploy_enable_freeze_privilege_action,
    spot_deploy_enable_quote_token_action,
    spot_deploy_freeze_user_action,
    spot_deploy_genesis_action,
    spot_deploy_register_hyperliquidity_action,
    spot_deploy_register_spot_action,
    spot_deploy_register_token_action,
    spot_deploy_revoke_freeze_privilege_action,
    spot_deploy_set_deployer_trading_fee_share_action,
    spot_deploy_user_genesis_action,
)
from hyperliquid_signer.engine.exceptions import InvalidAddressError, PrecisionLossError
from hyperliquid_signer.engine.pipeline import sign_l1_action
from hyperliquid_signer.schemas.deploy import PerpDexSchema
from hyperliquid_signer.wire.encoder import encode

USER = "0x1d9470d4b963f552e6f671a81619d395877bf409"


def register_asset(**overrides):
    params = dict(
        dex="test",
        max_gas=None,
        coin="test:ABC",
        sz_decimals=2,
        oracle_px="10.50",
        margin_table_id=10,
        only_isolated=False,
        schema=None,
    )
    params.update(overrides)
    return perp_deploy_register_asset_action(**params)


class TestSpotDeploy:
    """Wire layout of ``spotDeploy`` variants."""

    def test_register_token(self):
        action = spot_deploy_register_token_action("TEST", 2, 8, 1_000_000, "Test Token")
        assert action.to_python() == {
            "type": "spotDeploy",
            "registerToken2": {
                "spec": {"name": "TEST", "szDecimals": 2, "weiDecimals": 8},
                "maxGas": 1_000_000,
                "fullName": "Test Token",
            },
        }
        assert list(action.to_python()["registerToken2"]) == ["spec", "maxGas", "fullName"]

    def test_user_genesis_lowercases_users(self):
        action = spot_deploy_user_genesis_action(
            1,
            [(USER.upper().replace("0X", "0x"), "100000000")],
            [(0, "5000")],
        )
        assert action.to_python()["userGenesis"] == {
            "token": 1,
            "userAndWei": [[USER, "100000000"]],
            "existingTokenAndWei": [[0, "5000"]],
        }

    def test_user_genesis_rejects_bad_address(self):
        with pytest.raises(InvalidAddressError):
            spot_deploy_user_genesis_action(1, [("0x1234", "1")], [])

    def test_genesis_omits_unset_flag(self):
        encoded = encode(spot_deploy_genesis_action(1, "1000000"))
        assert b"noHyperliquidity" not in encoded
        assert b"\xc0" not in encoded

    def test_genesis_with_flag(self):
        action = spot_deploy_genesis_action(1, "1000000", no_hyperliquidity=True)
        assert action.to_python()["genesis"] == {"token": 1, "maxSupply": "1000000", "noHyperliquidity": True}
        assert encode(action).endswith(b"\xb0noHyperliquidity\xc3")

    def test_register_spot(self):
        assert spot_deploy_register_spot_action(3, 0).to_python() == {
            "type": "spotDeploy",
            "registerSpot": {"tokens": [3, 0]},
        }

    def test_register_hyperliquidity(self):
        action = spot_deploy_register_hyperliquidity_action(7, "2.50", 100, 20)
        assert action.to_python()["registerHyperliquidity"] == {
            "spot": 7,
            "startPx": "2.5",
            "orderSz": "100",
            "nOrders": 20,
        }
        seeded = spot_deploy_register_hyperliquidity_action(7, "2.5", 100, 20, n_seeded_levels=5)
        assert list(seeded.to_python()["registerHyperliquidity"])[-1] == "nSeededLevels"

    def test_register_hyperliquidity_rejects_precision_loss(self):
        with pytest.raises(PrecisionLossError):
            spot_deploy_register_hyperliquidity_action(7, "2.123456789", 100, 20)

    def test_fee_share_and_freeze(self):
        assert spot_deploy_set_deployer_trading_fee_share_action(1, "100%").to_python() == {
            "type": "spotDeploy",
            "setDeployerTradingFeeShare": {"token": 1, "share": "100%"},
        }
        assert spot_deploy_freeze_user_action(1, USER, True).to_python()["freezeUser"] == {
            "token": 1,
            "user": USER,
            "freeze": True,
        }

    @pytest.mark.parametrize(
        "builder, variant",
        [
            (spot_deploy_enable_freeze_privilege_action, "enableFreezePrivilege"),
            (spot_deploy_revoke_freeze_privilege_action, "revokeFreezePrivilege"),
            (spot_deploy_enable_quote_token_action, "enableQuoteToken"),
        ],
    )
    def test_token_only_variants(self, builder, variant):
        assert builder(4).to_python() == {"type": "spotDeploy", variant: {"token": 4}}


class TestPerpDeployRegisterAsset:
    """``registerAsset`` always sends its optional keys, as nulls when unset."""

    def test_unset_options_are_explicit_nulls(self):
        python = register_asset().to_python()
        assert python == {
            "type": "perpDeploy",
            "registerAsset": {
                "maxGas": None,
                "assetRequest": {
                    "coin": "test:ABC",
                    "szDecimals": 2,
                    "oraclePx": "10.5",
                    "marginTableId": 10,
                    "onlyIsolated": False,
                },
                "dex": "test",
                "schema": None,
            },
        }

    def test_nulls_are_encoded_as_nil(self):
        encoded = encode(register_asset())
        assert b"\xa6maxGas\xc0" in encoded
        assert encoded.endswith(b"\xa6schema\xc0")

    def test_schema_with_null_oracle_updater(self):
        schema = PerpDexSchema(full_name="Test Dex", collateral_token=0)
        action = register_asset(max_gas=500, schema=schema)
        python = action.to_python()["registerAsset"]

        assert python["maxGas"] == 500
        assert python["schema"] == {"fullName": "Test Dex", "collateralToken": 0, "oracleUpdater": None}
        assert encode(action).endswith(b"\xadoracleUpdater\xc0")

    def test_schema_accepts_wire_names(self):
        schema = PerpDexSchema(fullName="Test Dex", collateralToken=0, oracleUpdater=USER.upper().replace("0X", "0x"))
        python = register_asset(schema=schema).to_python()["registerAsset"]
        assert python["schema"]["oracleUpdater"] == USER

    def test_schema_rejects_bad_updater(self):
        with pytest.raises(InvalidAddressError):
            PerpDexSchema(full_name="Test Dex", collateral_token=0, oracle_updater="0x12")


class TestPerpDeploySetOracle:

    def test_prices_are_sorted_wire_pairs(self):
        action = perp_deploy_set_oracle_action(
            "test",
            {"test:XYZ": "1.10", "test:ABC": 60000},
            [{"test:XYZ": "1.2", "test:ABC": "59999.5"}, {"test:ABC": 1}],
            {"test:ABC": "0.5"},
        )
        assert action.to_python() == {
            "type": "perpDeploy",
            "setOracle": {
                "dex": "test",
                "oraclePxs": [["test:ABC", "60000"], ["test:XYZ", "1.1"]],
                "markPxs": [
                    [["test:ABC", "59999.5"], ["test:XYZ", "1.2"]],
                    [["test:ABC", "1"]],
                ],
                "externalPerpPxs": [["test:ABC", "0.5"]],
            },
        }

    def test_insertion_order_does_not_change_encoding(self):
        first = perp_deploy_set_oracle_action("test", {"B": "1", "A": "2"}, [], {})
        second = perp_deploy_set_oracle_action("test", {"A": "2", "B": "1"}, [], {})
        assert encode(first) == encode(second)


class TestDeploySigning:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("is_mainnet", [True, False])
    async def test_backends_agree(self, raw_signer, typed_signer, is_mainnet):
        action = register_asset(schema=PerpDexSchema(full_name="Test Dex", collateral_token=0))
        raw = await sign_l1_action(raw_signer, action, 1700000000000, is_mainnet=is_mainnet)
        typed = await sign_l1_action(typed_signer, action, 1700000000000, is_mainnet=is_mainnet)
        assert raw == typed

    @pytest.mark.asyncio
    async def test_null_and_omitted_hash_differently(self, raw_signer):
        with_null = register_asset()
        with_gas = register_asset(max_gas=0)
        first = await sign_l1_action(raw_signer, with_null, 1, is_mainnet=True)
        second = await sign_l1_action(raw_signer, with_gas, 1, is_mainnet=True)
        assert first != second
