"""
Action hash and phantom agent tests, checked against reference vectors.

Usage:
    pytest tests/test_signing/test_action_hash.py -v
"""

import pytest
from eth_utils import keccak

from hyperliquid_signer.actions.orders import order_action
from hyperliquid_signer.engine.exceptions import InvalidAddressError, UnsupportedValueError
from hyperliquid_signer.schemas.orders import LimitOrderType, OrderRequest, Tif
from hyperliquid_signer.signing.action_hash import action_hash
from hyperliquid_signer.signing.typed_data import l1_typed_data
from hyperliquid_signer.wire.encoder import encode
from hyperliquid_signer.wire.numeric import to_int_for_hashing
from hyperliquid_signer.wire.values import Action


def dummy_action() -> Action:
    return Action().set("type", "dummy").set("num", to_int_for_hashing(1000))


class TestActionHashLayout:
    """Byte layout of the hashed buffer."""

    def test_without_vault_or_expiry(self):
        encoded = encode(dummy_action())
        expected = keccak(encoded + (7).to_bytes(8, "big") + b"\x00")
        assert action_hash(dummy_action(), 7) == expected

    def test_with_vault(self, vault_address):
        encoded = encode(dummy_action())
        expected = keccak(encoded + (7).to_bytes(8, "big") + b"\x01" + bytes.fromhex(vault_address[2:]))
        assert action_hash(dummy_action(), 7, vault_address) == expected

    def test_with_expiry(self):
        encoded = encode(dummy_action())
        expected = keccak(encoded + (7).to_bytes(8, "big") + b"\x00" + b"\x00" + (99).to_bytes(8, "big"))
        assert action_hash(dummy_action(), 7, None, 99) == expected

    def test_accepts_pre_encoded_bytes(self):
        assert action_hash(encode(dummy_action()), 0) == action_hash(dummy_action(), 0)

    def test_is_deterministic(self, vault_address):
        first = action_hash(dummy_action(), 1677777606040, vault_address, 1677777700000)
        second = action_hash(dummy_action(), 1677777606040, vault_address, 1677777700000)
        assert first == second
        assert len(first) == 32

    def test_vault_and_expiry_change_the_digest(self, vault_address):
        plain = action_hash(dummy_action(), 0)
        assert action_hash(dummy_action(), 0, vault_address) != plain
        assert action_hash(dummy_action(), 0, None, 0) != plain

    def test_malformed_vault(self):
        with pytest.raises(InvalidAddressError):
            action_hash(dummy_action(), 0, "0x1234")
        with pytest.raises(InvalidAddressError):
            action_hash(dummy_action(), 0, "0x" + "zz" * 20)

    def test_nonce_out_of_range(self):
        with pytest.raises(UnsupportedValueError):
            action_hash(dummy_action(), -1)
        with pytest.raises(UnsupportedValueError):
            action_hash(dummy_action(), 2**64)


class TestPhantomAgent:
    """Connection id embedded into the Agent struct."""

    def test_connection_id_matches_reference_order(self):
        order = OrderRequest(
            asset=4,
            is_buy=True,
            sz="0.0147",
            limit_px="1670.1",
            reduce_only=False,
            order_type=LimitOrderType(tif=Tif.IOC),
        )
        connection_id = action_hash(order_action([order]), 1677777606040)
        document = l1_typed_data(connection_id, is_mainnet=True)
        assert document.message["source"] == "a"
        assert "0x" + document.message["connectionId"].hex() == (
            "0x0fcbeda5ae3c4950a548021552a4fea2226858c4453571bf3f24ba017eac2908"
        )

    def test_testnet_source(self):
        document = l1_typed_data(b"\x00" * 32, is_mainnet=False)
        assert document.message["source"] == "b"
