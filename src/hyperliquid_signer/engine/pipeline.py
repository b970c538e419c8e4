"""
Signing Pipeline

Entry points used by the account/session layer:

    action ──encode──▶ bytes ──action_hash──▶ connection id ──┐
                                                              ├─▶ TypedDataDocument ─▶ signer ─▶ Signature
    user-signed action ──implicit fields───────────────────────┘

Every path builds exactly one ``TypedDataDocument``. A raw-hash signer gets
``document.signing_hash()``; a typed-data signer gets the document itself.
Nonces come from the caller and failures are never retried here.
"""

from enum import Enum
from typing import Optional, Sequence, Union

from ..constants import VAULTLESS_ACTION_TYPES
from ..schemas.signatures import Signature
from ..signing.action_hash import action_hash
from ..signing.eip712 import TypedField
from ..signing.sign_types import PrimaryType
from ..signing.signers import RawHashSigner, TypedDataSigner
from ..signing.standards import TypedDataDocument
from ..signing.typed_data import l1_typed_data, user_signed_typed_data
from ..utils import logger, normalize_address
from ..wire.encoder import Encodable
from ..wire.values import Action

Signer = Union[RawHashSigner, TypedDataSigner]
VaultAddress = Optional[Union[str, bytes]]


class ActionCategory(str, Enum):
    """Which domain and struct an action is signed under."""
    L1 = "l1"
    USER_SIGNED = "user_signed"


def effective_vault_address(action: Encodable, vault_address: VaultAddress) -> VaultAddress:
    """Drop the vault qualifier for action kinds the exchange hashes without one."""
    if isinstance(action, Action) and action.action_type in VAULTLESS_ACTION_TYPES:
        return None
    return vault_address


# ---------------------------------------------------------------------------
# Document preparation
# ---------------------------------------------------------------------------

def prepare_l1(
    action: Encodable,
    nonce: int,
    *,
    is_mainnet: bool,
    vault_address: VaultAddress = None,
    expires_after: Optional[int] = None,
) -> TypedDataDocument:
    """
    Encode and hash an L1 action and wrap it in the phantom agent document.

    Args:
        action: Ordered action (or list envelope for multi-sig payloads).
        nonce: Caller-supplied millisecond timestamp.
        is_mainnet: Network selector.
        vault_address: Optional vault; ignored for vault-less action kinds.
        expires_after: Optional expiry timestamp.

    Returns:
        TypedDataDocument: ``Agent`` document on the L1 domain.
    """
    connection_id = action_hash(
        action,
        nonce,
        effective_vault_address(action, vault_address),
        expires_after,
    )
    return l1_typed_data(connection_id, is_mainnet)


def prepare_user_signed(
    action: Action,
    primary_type: Union[PrimaryType, str],
    *,
    is_mainnet: bool,
    fields: Optional[Sequence[TypedField]] = None,
) -> TypedDataDocument:
    return user_signed_typed_data(action, primary_type, is_mainnet, fields=fields)


def hash_and_maybe_render_typed_data(
    action: Encodable,
    nonce: int,
    vault_address: VaultAddress,
    expires_after: Optional[int],
    category: ActionCategory,
    *,
    is_mainnet: bool,
    primary_type: Optional[Union[PrimaryType, str]] = None,
    render: bool = False,
) -> Union[bytes, TypedDataDocument]:
    """
    Produce either the final signing hash or the typed-data document.

    For ``USER_SIGNED`` actions ``nonce``, ``vault_address`` and
    ``expires_after`` are not part of the digest; the nonce travels inside the
    action's own ``time``/``nonce`` field.

    Args:
        render: Return the document instead of its 32-byte signing hash.

    Raises:
        ValueError: ``USER_SIGNED`` without a ``primary_type``.
    """
    category = ActionCategory(category)
    if category is ActionCategory.L1:
        document = prepare_l1(
            action,
            nonce,
            is_mainnet=is_mainnet,
            vault_address=vault_address,
            expires_after=expires_after,
        )
    else:
        if primary_type is None:
            raise ValueError("user-signed actions need a primary type")
        if not isinstance(action, Action):
            raise ValueError("user-signed actions must be an Action")
        document = prepare_user_signed(action, primary_type, is_mainnet=is_mainnet)
    return document if render else document.signing_hash()


# ---------------------------------------------------------------------------
# Signing
# ---------------------------------------------------------------------------

async def sign_document(signer: Signer, document: TypedDataDocument) -> Signature:
    """
    Sign a prepared document with either backend.

    Raises:
        SigningError: Backend failure.
        InvalidSignatureEncodingError: A wallet returned malformed hex.
    """
    if isinstance(signer, RawHashSigner):
        signing_hash = document.signing_hash()
        logger.debug(f"signing {document.primary_type} hash 0x{signing_hash.hex()}")
        return signer.sign(signing_hash)
    if isinstance(signer, TypedDataSigner):
        logger.debug(f"requesting typed-data signature for {document.primary_type}")
        return Signature.from_hex(await signer.sign_typed_data(document))
    raise TypeError(f"unsupported signer type: {type(signer).__name__}")


async def sign_l1_action(
    signer: Signer,
    action: Encodable,
    nonce: int,
    *,
    is_mainnet: bool,
    vault_address: VaultAddress = None,
    expires_after: Optional[int] = None,
) -> Signature:
    document = prepare_l1(
        action,
        nonce,
        is_mainnet=is_mainnet,
        vault_address=vault_address,
        expires_after=expires_after,
    )
    return await sign_document(signer, document)


async def sign_user_signed_action(
    signer: Signer,
    action: Action,
    primary_type: Union[PrimaryType, str],
    *,
    is_mainnet: bool,
    fields: Optional[Sequence[TypedField]] = None,
) -> Signature:
    """
    Sign a user-signed action.

    The request body must carry the same implicit fields that were signed;
    build it from ``engine.payloads.posted_user_action(action, is_mainnet)``
    or use ``engine.payloads.signed_user_payload``.
    """
    document = prepare_user_signed(action, primary_type, is_mainnet=is_mainnet, fields=fields)
    return await sign_document(signer, document)


# ---------------------------------------------------------------------------
# Multi-sig
# ---------------------------------------------------------------------------

async def sign_multi_sig_l1_action_payload(
    signer: Signer,
    action: Action,
    nonce: int,
    *,
    is_mainnet: bool,
    multi_sig_user: str,
    outer_signer: str,
    vault_address: VaultAddress = None,
    expires_after: Optional[int] = None,
) -> Signature:
    """Co-signer signature over an L1 action inside a multi-sig envelope."""
    envelope = [normalize_address(multi_sig_user), normalize_address(outer_signer), action]
    document = prepare_l1(
        envelope,
        nonce,
        is_mainnet=is_mainnet,
        vault_address=vault_address,
        expires_after=expires_after,
    )
    return await sign_document(signer, document)


def multi_sig_user_signed_fields(primary_type: Union[PrimaryType, str]) -> tuple:
    """Standard schema with the two signer addresses inserted after ``hyperliquidChain``."""
    base = PrimaryType(primary_type).fields
    return (
        base[0],
        TypedField("payloadMultiSigUser", "address"),
        TypedField("outerSigner", "address"),
        *base[1:],
    )


async def sign_multi_sig_user_signed_action_payload(
    signer: Signer,
    action: Action,
    primary_type: Union[PrimaryType, str],
    *,
    is_mainnet: bool,
    multi_sig_user: str,
    outer_signer: str,
) -> Signature:
    """Co-signer signature over a user-signed action inside a multi-sig envelope."""
    envelope = (
        action.copy()
        .set("payloadMultiSigUser", normalize_address(multi_sig_user))
        .set("outerSigner", normalize_address(outer_signer))
    )
    return await sign_user_signed_action(
        signer,
        envelope,
        primary_type,
        is_mainnet=is_mainnet,
        fields=multi_sig_user_signed_fields(primary_type),
    )


async def sign_multi_sig_action(
    signer: Signer,
    action: Action,
    nonce: int,
    *,
    is_mainnet: bool,
    vault_address: VaultAddress = None,
    expires_after: Optional[int] = None,
) -> Signature:
    """
    Outer signature over a ``multiSig`` action.

    The action is hashed without its ``type`` tag like an L1 action, and that
    hash is then user-signed as a ``SendMultiSig`` envelope.
    """
    multi_sig_action_hash = action_hash(action.without("type"), nonce, vault_address, expires_after)
    envelope = Action().set("multiSigActionHash", multi_sig_action_hash).set("nonce", nonce)
    return await sign_user_signed_action(
        signer,
        envelope,
        PrimaryType.SEND_MULTI_SIG,
        is_mainnet=is_mainnet,
    )
