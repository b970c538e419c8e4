from .exceptions import (
    HyperliquidSignerError,
    UnsupportedValueError,
    InvalidAddressError,
    PrecisionLossError,
    SigningError,
    InvalidSignatureEncodingError,
    ConfigurationError,
)

__all__ = [
    "HyperliquidSignerError",
    "UnsupportedValueError",
    "InvalidAddressError",
    "PrecisionLossError",
    "SigningError",
    "InvalidSignatureEncodingError",
    "ConfigurationError",
]
