"""
Signer Configuration

Reads signer settings from the environment (a ``.env`` file is loaded on
import) and builds the matching signer backend.

Environment variables:
    HL_NETWORK          "Mainnet" (default) or "Testnet"
    HL_PRIVATE_KEY      hex private key for the in-process signer
    HL_WALLET_RPC_URL   JSON-RPC endpoint of an external wallet
    HL_WALLET_ADDRESS   account the external wallet signs with
    HL_VAULT_ADDRESS    optional vault/sub-account to act for
    HL_EXPIRES_AFTER    optional expiry timestamp in milliseconds
"""

import os
from typing import Literal, Optional, Union

import dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import MAINNET_API_URL, MAINNET_CHAIN_NAME, TESTNET_API_URL
from .engine.exceptions import ConfigurationError, InvalidAddressError
from .signing.remote import RemoteTypedDataSigner
from .signing.signers import PrivateKeySigner
from .utils import normalize_address

dotenv.load_dotenv()


class SignerSettings(BaseModel):
    """Network selection plus the credentials for one signer backend."""

    network: Literal["Mainnet", "Testnet"] = Field(default=MAINNET_CHAIN_NAME)
    private_key: Optional[str] = Field(default=None, repr=False, description="Hex private key")
    wallet_rpc_url: Optional[str] = Field(default=None, description="External wallet JSON-RPC URL")
    wallet_address: Optional[str] = Field(default=None, description="External wallet account")
    vault_address: Optional[str] = Field(default=None, description="Vault or sub-account address")
    expires_after: Optional[int] = Field(default=None, ge=0, description="Expiry timestamp (ms)")

    @field_validator("wallet_address", "vault_address")
    @classmethod
    def _normalize(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            return normalize_address(value)
        except InvalidAddressError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def is_mainnet(self) -> bool:
        return self.network == MAINNET_CHAIN_NAME

    @property
    def api_url(self) -> str:
        return MAINNET_API_URL if self.is_mainnet else TESTNET_API_URL


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None


def load_settings_from_env() -> SignerSettings:
    """
    Build ``SignerSettings`` from ``HL_*`` environment variables.

    Raises:
        ConfigurationError: If any variable holds an invalid value.
    """
    network = (_env("HL_NETWORK") or MAINNET_CHAIN_NAME).capitalize()
    raw = {
        "network": network,
        "private_key": _env("HL_PRIVATE_KEY"),
        "wallet_rpc_url": _env("HL_WALLET_RPC_URL"),
        "wallet_address": _env("HL_WALLET_ADDRESS"),
        "vault_address": _env("HL_VAULT_ADDRESS"),
        "expires_after": _env("HL_EXPIRES_AFTER"),
    }
    try:
        return SignerSettings(**raw)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid signer settings: {exc}") from exc


def signer_from_settings(settings: SignerSettings) -> Union[PrivateKeySigner, RemoteTypedDataSigner]:
    """
    Pick the signer backend described by ``settings``.

    A private key wins over a wallet endpoint when both are present.

    Raises:
        ConfigurationError: If neither backend is configured.
    """
    if settings.private_key:
        return PrivateKeySigner(settings.private_key)
    if settings.wallet_rpc_url and settings.wallet_address:
        return RemoteTypedDataSigner(settings.wallet_rpc_url, settings.wallet_address)
    raise ConfigurationError("set HL_PRIVATE_KEY or both HL_WALLET_RPC_URL and HL_WALLET_ADDRESS")
