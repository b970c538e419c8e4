"""
Action hash (connection id) computation.

    keccak256(encoded ‖ be64(nonce) ‖ (0x01 ‖ vault | 0x00) ‖ [0x00 ‖ be64(expiry)])
"""

from typing import Optional, Union

from eth_utils import keccak

from ..constants import UINT64_MAX
from ..engine.exceptions import UnsupportedValueError
from ..utils import address_to_bytes, logger
from ..wire.encoder import Encodable, encode


def _be64(value: int, label: str) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT64_MAX:
        raise UnsupportedValueError(f"{label} must be an unsigned 64-bit integer, got {value!r}")
    return value.to_bytes(8, "big")


def action_hash(
    action: Union[bytes, Encodable],
    nonce: int,
    vault_address: Optional[Union[str, bytes]] = None,
    expires_after: Optional[int] = None,
) -> bytes:
    """
    Compute the 32-byte action hash.

    Args:
        action: Already-encoded bytes or anything ``encode`` accepts.
        nonce: Caller-supplied millisecond timestamp.
        vault_address: Optional 20-byte vault address (hex or raw bytes).
        expires_after: Optional expiry timestamp; omitted from the digest
            entirely when ``None``.

    Returns:
        bytes: keccak256 digest.

    Raises:
        UnsupportedValueError: Unencodable action or out-of-range nonce/expiry.
        InvalidAddressError: Malformed vault address.
    """
    encoded = bytes(action) if isinstance(action, (bytes, bytearray)) else encode(action)
    data = bytearray(encoded)
    data += _be64(nonce, "nonce")
    if vault_address is None:
        data += b"\x00"
    else:
        data += b"\x01" + address_to_bytes(vault_address)
    if expires_after is not None:
        data += b"\x00" + _be64(expires_after, "expires_after")
    digest = keccak(bytes(data))
    logger.debug(f"action hash 0x{digest.hex()} (nonce={nonce}, vault={vault_address}, expires_after={expires_after})")
    return digest
