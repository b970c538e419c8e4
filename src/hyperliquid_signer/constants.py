"""
Protocol Constants

Fixed values shared by the exchange's reference signer. Changing any of
these produces signatures the exchange rejects.
"""

MAINNET_API_URL = "https://api.hyperliquid.xyz"
TESTNET_API_URL = "https://api.hyperliquid-testnet.xyz"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# L1 (order/cancel style) domain
L1_DOMAIN_NAME = "Exchange"
L1_DOMAIN_VERSION = "1"
L1_CHAIN_ID = 1337

# User-signed (transfer/approval style) domain
USER_SIGNED_DOMAIN_NAME = "HyperliquidSignTransaction"
USER_SIGNED_DOMAIN_VERSION = "1"
SIGNATURE_CHAIN_ID = "0x66eee"
USER_SIGNED_CHAIN_ID = int(SIGNATURE_CHAIN_ID, 16)

MAINNET_SOURCE = "a"
TESTNET_SOURCE = "b"

MAINNET_CHAIN_NAME = "Mainnet"
TESTNET_CHAIN_NAME = "Testnet"

AGENT_PRIMARY_TYPE = "Agent"

WIRE_DECIMALS = 8
HASH_SCALE_POWER = 8
USD_SCALE_POWER = 6

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)

# L1 action kinds hashed without a vault qualifier
VAULTLESS_ACTION_TYPES = frozenset({
    "createSubAccount",
    "setReferrer",
    "subAccountTransfer",
    "subAccountSpotTransfer",
    "vaultTransfer",
})

# Action kinds whose request body never carries a vault address: the
# vault-less L1 kinds plus user-signed kinds that name the sub-account inline
NO_VAULT_PAYLOAD_ACTION_TYPES = VAULTLESS_ACTION_TYPES | frozenset({
    "usdClassTransfer",
    "sendAsset",
})


def chain_name(is_mainnet: bool) -> str:
    return MAINNET_CHAIN_NAME if is_mainnet else TESTNET_CHAIN_NAME


def agent_source(is_mainnet: bool) -> str:
    return MAINNET_SOURCE if is_mainnet else TESTNET_SOURCE
