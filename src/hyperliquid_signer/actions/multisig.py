"""
Multi-sig action envelope.

Co-signers sign the inner action first (see
``engine.pipeline.sign_multi_sig_l1_action_payload`` and
``sign_multi_sig_user_signed_action_payload``); the outer signer then wraps
their signatures with ``multi_sig_action`` and signs the result with
``engine.pipeline.sign_multi_sig_action``.
"""

from typing import Iterable

from ..constants import SIGNATURE_CHAIN_ID
from ..schemas.signatures import Signature
from ..utils import normalize_address
from ..wire.values import Action


def multi_sig_action(
    multi_sig_user: str,
    outer_signer: str,
    inner_action: Action,
    signatures: Iterable[Signature],
) -> Action:
    payload = (
        Action()
        .set("multiSigUser", normalize_address(multi_sig_user))
        .set("outerSigner", normalize_address(outer_signer))
        .set("action", inner_action)
    )
    return (
        Action()
        .set("type", "multiSig")
        .set("signatureChainId", SIGNATURE_CHAIN_ID)
        .set("signatures", [sig.to_dict() for sig in signatures])
        .set("payload", payload)
    )
