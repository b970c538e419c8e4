"""
Order action builder tests with reference signatures.

Usage:
    pytest tests/test_actions/test_orders.py -v
"""

import pytest

from hyperliquid_signer.actions.orders import (
    batch_modify_action,
    cancel_action,
    cancel_by_cloid_action,
    modify_action,
    order_action,
    order_request_to_order_wire,
    order_type_to_wire,
    schedule_cancel_action,
)
from hyperliquid_signer.engine.pipeline import sign_l1_action
from hyperliquid_signer.schemas.orders import (
    BuilderInfo,
    CancelByCloidRequest,
    CancelRequest,
    Cloid,
    Grouping,
    LimitOrderType,
    ModifyRequest,
    OrderRequest,
    Tif,
    TriggerOrderType,
    Tpsl,
)
from hyperliquid_signer.schemas.signatures import Signature
from hyperliquid_signer.wire.encoder import encode


def limit_order(**overrides) -> OrderRequest:
    fields = dict(
        asset=1,
        is_buy=True,
        sz=100,
        limit_px=100,
        reduce_only=False,
        order_type=LimitOrderType(tif=Tif.GTC),
    )
    fields.update(overrides)
    return OrderRequest(**fields)


class TestOrderWire:
    """Order wire layout."""

    def test_key_order(self):
        wire = order_request_to_order_wire(limit_order(cloid=Cloid.from_int(1)))
        assert wire.keys() == ["a", "b", "p", "s", "r", "t", "c"]
        assert wire.to_python() == {
            "a": 1,
            "b": True,
            "p": "100",
            "s": "100",
            "r": False,
            "t": {"limit": {"tif": "Gtc"}},
            "c": "0x00000000000000000000000000000001",
        }

    def test_trigger_type(self):
        wire = order_type_to_wire(TriggerOrderType(triggerPx="103.50", isMarket=True, tpsl=Tpsl.SL))
        assert wire.to_python() == {"trigger": {"isMarket": True, "triggerPx": "103.5", "tpsl": "sl"}}

    def test_order_action_layout(self):
        builder = BuilderInfo(builder="0x" + "AB" * 20, fee=10)
        action = order_action([limit_order()], builder=builder, grouping=Grouping.NORMAL_TPSL)
        assert action.keys() == ["type", "orders", "grouping", "builder"]
        python = action.to_python()
        assert python["grouping"] == "normalTpsl"
        assert python["builder"] == {"b": "0x" + "ab" * 20, "f": 10}

    def test_cloid_only_appends_a_segment(self):
        """Adding ``c`` bumps the map header and appends bytes; nothing before it moves."""
        cloid = Cloid.from_int(1)
        without = encode(order_request_to_order_wire(limit_order()))
        with_cloid = encode(order_request_to_order_wire(limit_order(cloid=cloid)))

        assert with_cloid[0] == without[0] + 1
        assert with_cloid[1:len(without)] == without[1:]
        assert with_cloid[len(without):] == encode("c") + encode(cloid.to_raw())


class TestOrderSignatures:
    """Reference signatures for order actions at nonce 0."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "is_mainnet, r, s, v",
        [
            (
                True,
                "0xd65369825a9df5d80099e513cce430311d7d26ddf477f5b3a33d2806b100d78e",
                "0x2b54116ff64054968aa237c20ca9ff68000f977c93289157748a3162b6ea940e",
                28,
            ),
            (
                False,
                "0x82b2ba28e76b3d761093aaded1b1cdad4960b3af30212b343fb2e6cdfa4e3d54",
                "0x6b53878fc99d26047f4d7e8c90eb98955a109f44209163f52d8dc4278cbbd9f5",
                27,
            ),
        ],
    )
    async def test_limit_order(self, raw_signer, is_mainnet, r, s, v):
        signature = await sign_l1_action(raw_signer, order_action([limit_order()]), 0, is_mainnet=is_mainnet)
        assert signature == Signature(r=r, s=s, v=v)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "is_mainnet, r, s, v",
        [
            (
                True,
                "0x041ae18e8239a56cacbc5dad94d45d0b747e5da11ad564077fcac71277a946e3",
                "0x3c61f667e747404fe7eea8f90ab0e76cc12ce60270438b2058324681a00116da",
                27,
            ),
            (
                False,
                "0xeba0664bed2676fc4e5a743bf89e5c7501aa6d870bdb9446e122c9466c5cd16d",
                "0x7f3e74825c9114bc59086f1eebea2928c190fdfbfde144827cb02b85bbe90988",
                28,
            ),
        ],
    )
    async def test_limit_order_with_cloid(self, raw_signer, is_mainnet, r, s, v):
        action = order_action([limit_order(cloid=Cloid.from_str("0x00000000000000000000000000000001"))])
        signature = await sign_l1_action(raw_signer, action, 0, is_mainnet=is_mainnet)
        assert signature == Signature(r=r, s=s, v=v)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "is_mainnet, r, s, v",
        [
            (
                True,
                "0x98343f2b5ae8e26bb2587daad3863bc70d8792b09af1841b6fdd530a2065a3f9",
                "0x6b5bb6bb0633b710aa22b721dd9dee6d083646a5f8e581a20b545be6c1feb405",
                27,
            ),
            (
                False,
                "0x971c554d917c44e0e1b6cc45d8f9404f32172a9d3b3566262347d0302896a2e4",
                "0x206257b104788f80450f8e786c329daa589aa0b32ba96948201ae556d5637eac",
                28,
            ),
        ],
    )
    async def test_trigger_order(self, raw_signer, is_mainnet, r, s, v):
        order = limit_order(order_type=TriggerOrderType(triggerPx=103, isMarket=True, tpsl=Tpsl.SL))
        signature = await sign_l1_action(raw_signer, order_action([order]), 0, is_mainnet=is_mainnet)
        assert signature == Signature(r=r, s=s, v=v)


class TestScheduleCancel:

    def test_time_is_omitted_when_absent(self):
        assert schedule_cancel_action().to_python() == {"type": "scheduleCancel"}
        assert schedule_cancel_action(123456789).to_python() == {"type": "scheduleCancel", "time": 123456789}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "time, is_mainnet, r, s, v",
        [
            (
                None,
                True,
                "0x6cdfb286702f5917e76cd9b3b8bf678fcc49aec194c02a73e6d4f16891195df9",
                "0x6557ac307fa05d25b8d61f21fb8a938e703b3d9bf575f6717ba21ec61261b2a0",
                27,
            ),
            (
                None,
                False,
                "0xc75bb195c3f6a4e06b7d395acc20bbb224f6d23ccff7c6a26d327304e6efaeed",
                "0x342f8ede109a29f2c0723bd5efb9e9100e3bbb493f8fb5164ee3d385908233df",
                28,
            ),
            (
                123456789,
                True,
                "0x609cb20c737945d070716dcc696ba030e9976fcf5edad87afa7d877493109d55",
                "0x16c685d63b5c7a04512d73f183b3d7a00da5406ff1f8aad33f8ae2163bab758b",
                28,
            ),
            (
                123456789,
                False,
                "0x4e4f2dbd4107c69783e251b7e1057d9f2b9d11cee213441ccfa2be63516dc5bc",
                "0x706c656b23428c8ba356d68db207e11139ede1670481a9e01ae2dfcdb0e1a678",
                27,
            ),
        ],
    )
    async def test_reference_signatures(self, raw_signer, time, is_mainnet, r, s, v):
        signature = await sign_l1_action(raw_signer, schedule_cancel_action(time), 0, is_mainnet=is_mainnet)
        assert signature == Signature(r=r, s=s, v=v)


class TestCancelAndModify:

    def test_cancel(self):
        action = cancel_action([CancelRequest(asset=1, oid=42)])
        assert action.to_python() == {"type": "cancel", "cancels": [{"a": 1, "o": 42}]}

    def test_cancel_by_cloid(self):
        action = cancel_by_cloid_action([CancelByCloidRequest(asset=1, cloid=Cloid.from_int(7))])
        assert action.to_python() == {
            "type": "cancelByCloid",
            "cancels": [{"asset": 1, "cloid": "0x00000000000000000000000000000007"}],
        }

    def test_modify_by_oid_and_cloid(self):
        by_oid = modify_action(ModifyRequest(oid=5, order=limit_order()))
        assert by_oid.to_python()["modifies"][0]["oid"] == 5

        cloid = Cloid.from_int(9)
        batch = batch_modify_action([ModifyRequest(oid=cloid, order=limit_order(cloid=cloid))])
        modify = batch.to_python()["modifies"][0]
        assert batch.action_type == "batchModify"
        assert modify["oid"] == cloid.to_raw()
        assert list(modify["order"]) == ["a", "b", "p", "s", "r", "t", "c"]


class TestCloid:

    def test_validation(self):
        with pytest.raises(ValueError):
            Cloid.from_str("0x01")

    def test_random_is_well_formed(self):
        raw = Cloid.random().to_raw()
        assert raw.startswith("0x") and len(raw) == 34
