import json
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from ..constants import (
    L1_CHAIN_ID,
    L1_DOMAIN_NAME,
    L1_DOMAIN_VERSION,
    USER_SIGNED_CHAIN_ID,
    USER_SIGNED_DOMAIN_NAME,
    USER_SIGNED_DOMAIN_VERSION,
    ZERO_ADDRESS,
)
from .eip712 import EIP712_DOMAIN_FIELDS, TypedField, domain_separator, final_hash, struct_hash


# -----------------------------
# EIP-712 Domain
# -----------------------------

@dataclass(frozen=True)
class EIP712Domain:
    """
    EIP-712 domain separator.
    Used to prevent signature replay across domains.
    """
    name: str
    version: str
    chainId: int
    verifyingContract: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chainId,
            "verifyingContract": self.verifyingContract,
        }

    @property
    def separator(self) -> bytes:
        """Domain separator, computed once per distinct domain."""
        return _memoized_separator(self)


@lru_cache(maxsize=8)
def _memoized_separator(domain: EIP712Domain) -> bytes:
    return domain_separator(domain)


L1_DOMAIN = EIP712Domain(
    name=L1_DOMAIN_NAME,
    version=L1_DOMAIN_VERSION,
    chainId=L1_CHAIN_ID,
    verifyingContract=ZERO_ADDRESS,
)

USER_SIGNED_DOMAIN = EIP712Domain(
    name=USER_SIGNED_DOMAIN_NAME,
    version=USER_SIGNED_DOMAIN_VERSION,
    chainId=USER_SIGNED_CHAIN_ID,
    verifyingContract=ZERO_ADDRESS,
)


# -----------------------------
# Typed-data document
# -----------------------------

def _jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


@dataclass
class TypedDataDocument:
    """
    EIP-712 typed-data document for a single signing request.

    The same instance feeds both signer backends: ``signing_hash()`` for a
    raw-hash signer and ``to_dict()``/``to_json()`` for a wallet, which
    recomputes the identical hash on its side.

    Attributes:
        domain: One of the two protocol domains.
        primary_type: Primary struct name, e.g. ``"Agent"``.
        fields: Ordered schema of the primary struct.
        message: Field values. May carry extra keys the schema does not
            declare (e.g. ``signatureChainId``); those are not hashed.
    """
    domain: EIP712Domain
    primary_type: str
    fields: Tuple[TypedField, ...]
    message: Dict[str, Any] = field(default_factory=dict)

    @property
    def types(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            self.primary_type: [f.to_dict() for f in self.fields],
            "EIP712Domain": [f.to_dict() for f in EIP712_DOMAIN_FIELDS],
        }

    def struct_hash(self) -> bytes:
        return struct_hash(self.primary_type, self.fields, self.message)

    def signing_hash(self) -> bytes:
        """Final ``0x1901`` hash that a raw-hash signer signs."""
        return final_hash(self.domain.separator, self.struct_hash())

    def to_dict(self) -> Dict[str, Any]:
        """
        Full message for ``eth_account.Account.sign_typed_data(full_message=...)``.
        ``bytes32`` values stay as raw bytes.
        """
        return {
            "types": self.types,
            "primaryType": self.primary_type,
            "domain": self.domain.to_dict(),
            "message": dict(self.message),
        }

    def to_json(self) -> Dict[str, Any]:
        """JSON-safe variant with raw bytes rendered as ``0x`` hex, as wallets expect."""
        return _jsonable(self.to_dict())

    def to_json_string(self) -> str:
        return json.dumps(self.to_json(), separators=(",", ":"))
