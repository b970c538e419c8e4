"""
Signature Model

``Signature`` is the single output type of every signing backend: a raw-hash
signer builds it from integer components, a wallet's hex string is parsed
into it with ``Signature.from_hex``.

Wire encodings:
    - Request body: ``{"r": "0x..", "s": "0x..", "v": 27}``
    - Hex: ``0x`` + r (32 bytes) + s (32 bytes) + v (1 byte)
"""

from typing import Any, Dict, Optional, Union

from eth_utils import is_hex, remove_0x_prefix
from pydantic import ConfigDict, Field, PrivateAttr, field_validator

from ..engine.exceptions import InvalidSignatureEncodingError
from .bases import CanonicalModel

SIGNATURE_LENGTH = 65


def _to_word(value: Union[int, bytes, str]) -> str:
    if isinstance(value, bool):
        raise ValueError("signature component cannot be a bool")
    if isinstance(value, int):
        if not 0 <= value < 2**256:
            raise ValueError("signature component out of range")
        return "0x" + format(value, "064x")
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        body = remove_0x_prefix(value)
        if not body or not is_hex(body):
            raise ValueError(f"signature component is not hex: {value!r}")
        raw = bytes.fromhex(body.rjust(len(body) + len(body) % 2, "0"))
    else:
        raise ValueError(f"unsupported signature component type: {type(value).__name__}")
    if len(raw) > 32:
        raise ValueError("signature component longer than 32 bytes")
    return "0x" + raw.rjust(32, b"\x00").hex()


class Signature(CanonicalModel):
    """
    Recoverable secp256k1 signature.

    Equality and hashing only look at ``(r, s, v)``. A signature parsed with
    ``from_hex`` also remembers the exact text it came from, so ``to_hex``
    hands a wallet's string back unchanged whatever its letter case.

    Attributes:
        r: 32-byte component as lowercase ``0x`` + 64 hex digits.
        s: 32-byte component as lowercase ``0x`` + 64 hex digits.
        v: Recovery byte, ``recovery_id + 27``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    r: str = Field(..., description="Signature r component (0x + 64 hex)")
    s: str = Field(..., description="Signature s component (0x + 64 hex)")
    v: int = Field(..., ge=27, le=28, description="Recovery byte (27 or 28)")

    _source_hex: Optional[str] = PrivateAttr(default=None)

    @field_validator("r", "s", mode="before")
    @classmethod
    def _normalize_component(cls, value: Any) -> str:
        return _to_word(value)

    @classmethod
    def from_components(cls, r: int, s: int, v: int) -> "Signature":
        if v in (0, 1):
            v += 27
        return cls(r=r, s=s, v=v)

    @classmethod
    def from_hex(cls, text: str) -> "Signature":
        """
        Parse a 65-byte ``r ‖ s ‖ v`` hex string (``0x`` prefix optional).

        Raises:
            InvalidSignatureEncodingError: Wrong length, invalid hex, or
                ``v`` outside {27, 28}.
        """
        if not isinstance(text, str):
            raise InvalidSignatureEncodingError(f"signature must be a hex string, got {type(text).__name__}")
        text = text.strip()
        body = remove_0x_prefix(text)
        if len(body) != SIGNATURE_LENGTH * 2 or not is_hex(body):
            raise InvalidSignatureEncodingError(
                f"signature must be {SIGNATURE_LENGTH} bytes of hex, got {len(body)} hex digits"
            )
        raw = bytes.fromhex(body)
        v = raw[64]
        if v not in (27, 28):
            raise InvalidSignatureEncodingError(f"signature recovery byte must be 27 or 28, got {v}")
        signature = cls(r=raw[:32], s=raw[32:64], v=v)
        signature._source_hex = text
        return signature

    def to_hex(self) -> str:
        if self._source_hex is not None:
            return self._source_hex
        return "0x" + self.r[2:] + self.s[2:] + format(self.v, "02x")

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.r[2:] + self.s[2:]) + bytes([self.v])

    def to_dict(self) -> Dict[str, Any]:
        return {"r": self.r, "s": self.s, "v": self.v}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return (self.r, self.s, self.v) == (other.r, other.s, other.v)

    def __hash__(self) -> int:
        return hash((self.r, self.s, self.v))
