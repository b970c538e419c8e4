"""
Shared fixtures for the signing test suite.

The private key and every expected signature below are fixed regression
vectors produced by the exchange's reference signer.
"""

import pytest

from hyperliquid_signer.signing.signers import LocalTypedDataSigner, PrivateKeySigner

TEST_PRIVATE_KEY = "0x0123456789012345678901234567890123456789012345678901234567890123"
TEST_ADDRESS = "0x14791697260e4c9a71f18484c9f997b308e59325"
TEST_VAULT = "0x1719884eb866cb12b2287399b15f7db5e7d775ea"


@pytest.fixture
def private_key() -> str:
    return TEST_PRIVATE_KEY


@pytest.fixture
def signer_address() -> str:
    return TEST_ADDRESS


@pytest.fixture
def vault_address() -> str:
    return TEST_VAULT


@pytest.fixture
def raw_signer() -> PrivateKeySigner:
    return PrivateKeySigner(TEST_PRIVATE_KEY)


@pytest.fixture
def typed_signer() -> LocalTypedDataSigner:
    return LocalTypedDataSigner(TEST_PRIVATE_KEY)
