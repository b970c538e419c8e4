"""
Exception and Error Definitions Module

Defines the exception hierarchy surfaced by the encoding, hashing and signing
pipeline. All exceptions inherit from HyperliquidSignerError so callers can
catch every pipeline failure with a single clause. None of these errors are
retried internally.

Exception Hierarchy:
    HyperliquidSignerError (root)
    ├── UnsupportedValueError
    ├── InvalidAddressError
    ├── PrecisionLossError
    ├── SigningError
    ├── InvalidSignatureEncodingError
    └── ConfigurationError
"""


class HyperliquidSignerError(Exception):
    """
    Root exception class for all project-specific exceptions.

    All custom exceptions should inherit from this class to enable
    unified exception handling by the account/session layer.
    """
    pass


class UnsupportedValueError(HyperliquidSignerError):
    """
    Raised when a value cannot be represented in an action or a typed field.

    This includes scenarios such as:
    - Python objects outside the closed action value set (floats, Decimals)
    - Integers that do not fit the 64-bit wire integer family
    - A value whose type does not match its declared EIP-712 field type
    - A bytes32 value longer than 32 bytes
    """
    pass


class InvalidAddressError(HyperliquidSignerError):
    """
    Raised when an address is not a well-formed 20-byte hex address.

    This includes scenarios such as:
    - Wrong number of hex digits
    - Non-hex characters
    - Raw byte strings that are not exactly 20 bytes long
    """
    pass


class PrecisionLossError(HyperliquidSignerError):
    """
    Raised when converting a decimal would silently drop significant digits.

    Funds-related values are never truncated: a price or size with more
    fractional digits than the wire format carries is rejected instead.
    """
    pass


class SigningError(HyperliquidSignerError):
    """
    Raised when producing a signature fails.

    This includes scenarios such as:
    - A message hash that is not exactly 32 bytes
    - An error inside the secp256k1 signing routine
    - Transport or JSON-RPC failures from an external wallet
    """
    pass


class InvalidSignatureEncodingError(HyperliquidSignerError):
    """
    Raised when a hex signature cannot be parsed.

    This includes scenarios such as:
    - A decoded length other than 65 bytes
    - Invalid hex characters
    - A recovery byte ``v`` outside {27, 28}
    """
    pass


class ConfigurationError(HyperliquidSignerError):
    """
    Raised when signer configuration is missing or invalid.

    This includes scenarios such as:
    - Malformed private keys
    - Unknown network names
    - Settings that do not describe any usable signer backend
    """
    pass
