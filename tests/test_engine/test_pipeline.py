"""
Signing pipeline tests: entry points, category branching and multi-sig.

Usage:
    pytest tests/test_engine/test_pipeline.py -v
"""

import pytest
from eth_account import Account

from hyperliquid_signer.actions.multisig import multi_sig_action
from hyperliquid_signer.actions.orders import schedule_cancel_action
from hyperliquid_signer.actions.transfers import usd_send_action
from hyperliquid_signer.constants import SIGNATURE_CHAIN_ID
from hyperliquid_signer.engine.pipeline import (
    ActionCategory,
    hash_and_maybe_render_typed_data,
    multi_sig_user_signed_fields,
    prepare_l1,
    sign_document,
    sign_multi_sig_action,
    sign_multi_sig_l1_action_payload,
    sign_multi_sig_user_signed_action_payload,
)
from hyperliquid_signer.signing.action_hash import action_hash
from hyperliquid_signer.signing.sign_types import PrimaryType
from hyperliquid_signer.signing.standards import TypedDataDocument
from hyperliquid_signer.wire.values import Action

MULTI_SIG_USER = "0x0000000000000000000000000000000000000005"
DESTINATION = "0x5e9ee1089755c3435139848e47e6635505d5a13a"


class TestHashAndMaybeRender:
    """Single entry point for both categories."""

    def test_l1_hash_equals_rendered_document_hash(self, vault_address):
        action = schedule_cancel_action(5)
        digest = hash_and_maybe_render_typed_data(action, 9, vault_address, None, ActionCategory.L1, is_mainnet=True)
        document = hash_and_maybe_render_typed_data(
            action, 9, vault_address, None, ActionCategory.L1, is_mainnet=True, render=True
        )
        assert isinstance(document, TypedDataDocument)
        assert document.primary_type == "Agent"
        assert digest == document.signing_hash()
        assert len(digest) == 32

    def test_user_signed_requires_primary_type(self):
        action, _ = usd_send_action(DESTINATION, "1", 1)
        with pytest.raises(ValueError):
            hash_and_maybe_render_typed_data(action, 1, None, None, ActionCategory.USER_SIGNED, is_mainnet=True)

    def test_user_signed_document(self):
        action, primary_type = usd_send_action(DESTINATION, "1", 1)
        document = hash_and_maybe_render_typed_data(
            action,
            1,
            None,
            None,
            "user_signed",
            is_mainnet=False,
            primary_type=primary_type,
            render=True,
        )
        assert document.domain.chainId == 421614
        assert document.message["hyperliquidChain"] == "Testnet"

    def test_hash_is_recoverable_to_signer(self, raw_signer):
        """The raw-hash signature recovers to the signing account."""
        digest = hash_and_maybe_render_typed_data(
            schedule_cancel_action(), 0, None, None, ActionCategory.L1, is_mainnet=True
        )
        signature = raw_signer.sign(digest)
        recovered = Account._recover_hash(digest, signature=signature.to_bytes())
        assert recovered.lower() == raw_signer.address

    @pytest.mark.asyncio
    async def test_unknown_signer_type(self):
        with pytest.raises(TypeError):
            await sign_document(object(), prepare_l1(schedule_cancel_action(), 0, is_mainnet=True))


class TestMultiSig:
    """Co-signer payload signatures and the outer envelope."""

    @pytest.mark.asyncio
    async def test_l1_payload_signs_the_list_envelope(self, raw_signer, typed_signer):
        inner = schedule_cancel_action()
        signature = await sign_multi_sig_l1_action_payload(
            raw_signer,
            inner,
            0,
            is_mainnet=True,
            multi_sig_user=MULTI_SIG_USER,
            outer_signer=raw_signer.address,
        )
        envelope = [MULTI_SIG_USER, raw_signer.address, inner]
        expected = raw_signer.sign(prepare_l1(envelope, 0, is_mainnet=True).signing_hash())
        assert signature == expected

        typed = await sign_multi_sig_l1_action_payload(
            typed_signer,
            inner,
            0,
            is_mainnet=True,
            multi_sig_user=MULTI_SIG_USER,
            outer_signer=raw_signer.address,
        )
        assert typed == signature

    def test_user_signed_fields_insert_signers(self):
        names = [f.name for f in multi_sig_user_signed_fields(PrimaryType.USD_SEND)]
        assert names == ["hyperliquidChain", "payloadMultiSigUser", "outerSigner", "destination", "amount", "time"]

    @pytest.mark.asyncio
    async def test_user_signed_payload_backends_agree(self, raw_signer, typed_signer):
        action, primary_type = usd_send_action(DESTINATION, "1", 1)
        kwargs = dict(is_mainnet=False, multi_sig_user=MULTI_SIG_USER, outer_signer=raw_signer.address)
        raw = await sign_multi_sig_user_signed_action_payload(raw_signer, action, primary_type, **kwargs)
        typed = await sign_multi_sig_user_signed_action_payload(typed_signer, action, primary_type, **kwargs)
        assert raw == typed

    @pytest.mark.asyncio
    async def test_outer_signature_over_envelope(self, raw_signer, typed_signer):
        inner = schedule_cancel_action()
        co_signature = await sign_multi_sig_l1_action_payload(
            raw_signer,
            inner,
            7,
            is_mainnet=True,
            multi_sig_user=MULTI_SIG_USER,
            outer_signer=raw_signer.address,
        )
        action = multi_sig_action(MULTI_SIG_USER, raw_signer.address, inner, [co_signature])
        assert action.keys() == ["type", "signatureChainId", "signatures", "payload"]
        assert action.to_python()["signatureChainId"] == SIGNATURE_CHAIN_ID
        assert action.to_python()["signatures"] == [co_signature.to_dict()]

        raw = await sign_multi_sig_action(raw_signer, action, 7, is_mainnet=True)
        typed = await sign_multi_sig_action(typed_signer, action, 7, is_mainnet=True)
        assert raw == typed

        envelope = Action().set("multiSigActionHash", action_hash(action.without("type"), 7)).set("nonce", 7)
        document = hash_and_maybe_render_typed_data(
            envelope,
            7,
            None,
            None,
            ActionCategory.USER_SIGNED,
            is_mainnet=True,
            primary_type=PrimaryType.SEND_MULTI_SIG,
            render=True,
        )
        assert raw == raw_signer.sign(document.signing_hash())
