"""
Pytest fixtures for the sweb3-signer tests.
"""
import pytest
from eth_account import Account

from sweb3_signer import sign

# Constants for testing
TEST_PRIV_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TEST_TO = "0x1234567890123456789012345678901234567890"
TEST_QUOTA = 1000000
TEST_VALID_UNTIL_BLOCK = 999
TEST_CHAIN_ID = 1


@pytest.fixture
def account():
    """eth_account LocalAccount for TEST_PRIV_KEY"""
    return Account.from_key(TEST_PRIV_KEY)


@pytest.fixture
def base_params():
    """Minimal valid transaction fields, without key material"""
    return {
        "nonce": "test-nonce",
        "quota": TEST_QUOTA,
        "validUntilBlock": TEST_VALID_UNTIL_BLOCK,
        "chainId": TEST_CHAIN_ID,
        "to": TEST_TO,
        "value": 100,
        "data": "0xdeadbeef",
    }


@pytest.fixture
def signing_params(base_params, account):
    """Valid transaction fields including the private key"""
    return {**base_params, "privateKey": TEST_PRIV_KEY, "from": account.address}


@pytest.fixture
def signed_hex(signing_params):
    """Hex envelope produced by signing ``signing_params``"""
    return sign(signing_params)
