"""
EIP-712 Struct Hashing

The one implementation of domain separators, struct hashes and the final
``0x1901`` signing hash. Both the raw-hash signer and the typed-data
document rendered for wallets go through these functions, so the two
backends cannot drift apart.

Supported field types: ``string``, ``address``, ``bool``, ``uint64``,
``uint256`` and ``bytes32``. A value whose Python type does not match its
declared field type is rejected; nothing is coerced by guesswork.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from eth_utils import keccak

from ..engine.exceptions import UnsupportedValueError
from ..utils import address_to_bytes, hex_to_bytes

ZERO_WORD = b"\x00" * 32


@dataclass(frozen=True)
class TypedField:
    """A ``(name, type)`` entry of an EIP-712 struct schema."""
    name: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.type}


EIP712_DOMAIN_FIELDS = (
    TypedField("name", "string"),
    TypedField("version", "string"),
    TypedField("chainId", "uint256"),
    TypedField("verifyingContract", "address"),
)

_UINT_BITS = {"uint64": 64, "uint256": 256}


def encode_type(primary_type: str, fields: Sequence[TypedField]) -> str:
    return primary_type + "(" + ",".join(f"{f.type} {f.name}" for f in fields) + ")"


def type_hash(primary_type: str, fields: Sequence[TypedField]) -> bytes:
    return keccak(encode_type(primary_type, fields).encode("utf-8"))


def _type_mismatch(value: Any, type_name: str) -> UnsupportedValueError:
    return UnsupportedValueError(f"{type(value).__name__} value {value!r} does not match EIP-712 type {type_name}")


def _encode_uint(value: Any, type_name: str) -> bytes:
    bits = _UINT_BITS[type_name]
    if type_name == "uint256" and isinstance(value, str):
        try:
            value = int.from_bytes(hex_to_bytes(value), "big")
        except ValueError as exc:
            raise _type_mismatch(value, type_name) from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_mismatch(value, type_name)
    if not 0 <= value < 2**bits:
        raise UnsupportedValueError(f"{value} is out of range for {type_name}")
    return value.to_bytes(32, "big")


def _encode_bytes32(value: Any) -> bytes:
    if isinstance(value, str):
        try:
            raw = hex_to_bytes(value)
        except ValueError as exc:
            raise _type_mismatch(value, "bytes32") from exc
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise _type_mismatch(value, "bytes32")
    if len(raw) > 32:
        raise UnsupportedValueError(f"bytes32 value is {len(raw)} bytes long")
    return raw.rjust(32, b"\x00")


def encode_field(value: Any, type_name: str) -> bytes:
    """
    Encode one field value into its 32-byte EIP-712 word.

    Args:
        value: The field value.
        type_name: Declared EIP-712 type.

    Returns:
        bytes: 32-byte encoded word.

    Raises:
        UnsupportedValueError: Unknown type or a value of the wrong kind.
        InvalidAddressError: Malformed ``address`` value.
    """
    if type_name == "string":
        if not isinstance(value, str):
            raise _type_mismatch(value, type_name)
        return keccak(value.encode("utf-8"))
    if type_name == "address":
        if not isinstance(value, (str, bytes, bytearray)):
            raise _type_mismatch(value, type_name)
        return b"\x00" * 12 + address_to_bytes(value)
    if type_name == "bool":
        if not isinstance(value, bool):
            raise _type_mismatch(value, type_name)
        return b"\x00" * 31 + (b"\x01" if value else b"\x00")
    if type_name in _UINT_BITS:
        return _encode_uint(value, type_name)
    if type_name == "bytes32":
        return _encode_bytes32(value)
    raise UnsupportedValueError(f"unsupported EIP-712 field type: {type_name}")


def struct_hash(primary_type: str, fields: Sequence[TypedField], values: Mapping[str, Any]) -> bytes:
    """
    Hash a struct: ``keccak256(typeHash ‖ encodeField(v1) ‖ ... ‖ encodeField(vn))``.

    Fields missing from ``values`` contribute 32 zero bytes. Keys in
    ``values`` that the schema does not declare are ignored.
    """
    words = [type_hash(primary_type, fields)]
    for field in fields:
        value = values.get(field.name)
        words.append(ZERO_WORD if value is None else encode_field(value, field.type))
    return keccak(b"".join(words))


def domain_separator(domain: Any) -> bytes:
    """Hash an ``EIP712Domain`` (anything exposing ``to_dict()``)."""
    return struct_hash("EIP712Domain", EIP712_DOMAIN_FIELDS, domain.to_dict())


def final_hash(separator: bytes, hashed_struct: bytes) -> bytes:
    """``keccak256(0x19 0x01 ‖ domainSeparator ‖ structHash)``."""
    if len(separator) != 32 or len(hashed_struct) != 32:
        raise UnsupportedValueError("domain separator and struct hash must be 32 bytes each")
    return keccak(b"\x19\x01" + separator + hashed_struct)
