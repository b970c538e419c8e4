"""
Signing Backends

Two capabilities sit behind the signer port:

RawHashSigner
    Signs an already-computed 32-byte hash. ``PrivateKeySigner`` does this
    in-process with ``eth_account``.

TypedDataSigner
    Receives the whole typed-data document and returns a ``0x`` hex
    signature, recomputing the hash on its own side. ``LocalTypedDataSigner``
    plays that role with ``eth_account``'s independent EIP-712 encoder;
    ``RemoteTypedDataSigner`` (see ``remote.py``) forwards to a wallet.

For the same key and document both capabilities yield identical (r, s, v).
"""

from abc import ABC, abstractmethod

from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..engine.exceptions import ConfigurationError, SigningError
from ..schemas.signatures import Signature
from ..utils import logger
from .standards import TypedDataDocument


def _load_account(private_key: str) -> LocalAccount:
    try:
        return Account.from_key(private_key)
    except Exception as exc:
        raise ConfigurationError("invalid secp256k1 private key") from exc


class RawHashSigner(ABC):
    """Backend that signs a precomputed 32-byte hash."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Lowercase ``0x`` address of the signing account."""
        pass

    @abstractmethod
    def sign(self, message_hash: bytes) -> Signature:
        """
        Produce a recoverable signature over ``message_hash``.

        Raises:
            SigningError: If the hash is not 32 bytes or signing fails.
        """
        pass


class TypedDataSigner(ABC):
    """Backend that signs a full EIP-712 document and returns hex."""

    @property
    @abstractmethod
    def address(self) -> str:
        pass

    @abstractmethod
    async def sign_typed_data(self, document: TypedDataDocument) -> str:
        """
        Sign a typed-data document.

        Returns:
            str: ``0x``-prefixed 65-byte ``r ‖ s ‖ v`` hex string.

        Raises:
            SigningError: If the backend cannot produce a signature.
        """
        pass


class PrivateKeySigner(RawHashSigner):
    """
    In-process secp256k1 signer over raw hashes.

    Args:
        private_key: Hex-encoded 32-byte private key (``0x`` optional).

    Raises:
        ConfigurationError: If the key is malformed.

    Example::

        signer = PrivateKeySigner(private_key)
        signature = signer.sign(document.signing_hash())
    """

    def __init__(self, private_key: str):
        self._account = _load_account(private_key)

    @property
    def address(self) -> str:
        return self._account.address.lower()

    def sign(self, message_hash: bytes) -> Signature:
        if not isinstance(message_hash, (bytes, bytearray)) or len(message_hash) != 32:
            raise SigningError("message hash must be exactly 32 bytes")
        try:
            signed = self._account.unsafe_sign_hash(bytes(message_hash))
        except Exception as exc:
            raise SigningError(f"secp256k1 signing failed: {exc}") from exc
        logger.debug(f"signed hash 0x{bytes(message_hash).hex()} with {self.address}")
        return Signature.from_components(signed.r, signed.s, signed.v)


class LocalTypedDataSigner(TypedDataSigner):
    """
    Wallet stand-in that signs documents with ``eth_account``.

    ``eth_account`` re-derives the EIP-712 hash from ``document.to_dict()``
    with its own encoder, so this backend checks the document rather than
    the precomputed hash.
    """

    def __init__(self, private_key: str):
        self._account = _load_account(private_key)

    @property
    def address(self) -> str:
        return self._account.address.lower()

    async def sign_typed_data(self, document: TypedDataDocument) -> str:
        try:
            signed = self._account.sign_typed_data(full_message=document.to_dict())
        except Exception as exc:
            raise SigningError(f"typed-data signing failed: {exc}") from exc
        return "0x" + bytes(signed.signature).hex()
