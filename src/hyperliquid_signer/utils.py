"""
Shared helpers: package logger and hex/address conversions.
"""

import logging
from typing import Optional, Union

from eth_utils import is_hex, remove_0x_prefix

from .engine.exceptions import InvalidAddressError

LOGGER_NAME = "hyperliquid_signer"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(level: Union[int, str] = logging.INFO, fmt: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level, so repeated calls never
    duplicate output.

    Args:
        level: Logging level name or number.
        fmt: Optional ``logging.Formatter`` format string.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger


def address_to_bytes(address: Union[str, bytes]) -> bytes:
    """Parse a 20-byte address given as hex text (``0x`` optional) or raw bytes."""
    if isinstance(address, (bytes, bytearray)):
        if len(address) != 20:
            raise InvalidAddressError(f"address must be 20 bytes, got {len(address)}")
        return bytes(address)
    if not isinstance(address, str):
        raise InvalidAddressError(f"address must be str or bytes, got {type(address).__name__}")
    body = remove_0x_prefix(address)
    if len(body) != 40 or not is_hex(body):
        raise InvalidAddressError(f"malformed address: {address!r}")
    return bytes.fromhex(body)


def normalize_address(address: Union[str, bytes]) -> str:
    """Return the lowercase ``0x``-prefixed form of an address."""
    return "0x" + address_to_bytes(address).hex()


def hex_to_bytes(value: str) -> bytes:
    body = remove_0x_prefix(value)
    if len(body) % 2:
        body = "0" + body
    return bytes.fromhex(body)
