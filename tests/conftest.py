"""
Pytest fixtures for the Replay SDK tests.
"""
import re
import pytest

from replay_sdk.config import DeploymentConfig
from replay_sdk.utils import decode_pubkey

# Constants for testing
TEST_BASE_URL = "https://prod-flat-files-min.wormhole.com"
TEST_RECEIPT_PROGRAM = "Wapq3Hpv2aSKjWrh4pM8eweh8jVJB7D1nLBw9ikjVYx"
TEST_MINT = "85VBFQZC9TZkfaptBWjvUw7YbZjy52A6mjtPGjstQAmQ"
TEST_TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TEST_ATA_PROGRAM = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
TEST_WALLET = "9UuMq6FkcZLbCX84sw6L4sVzkNc6VBhTmASRVQoX6HLV"
TEST_PREIMAGE_HEX = "0123456789abcdef" * 4

# Matches any flat-file URL on the test store
FLAT_FILE_URL_RE = re.compile(re.escape(TEST_BASE_URL) + r"/[^/]+_\d+\.json")

# Sample identities, one per ecosystem, taken from the flat-file store
SAMPLE_IDENTITIES = {
    "Discord": "468526016151814164",
    "Solana": "9UuMq6FkcZLbCX84sw6L4sVzkNc6VBhTmASRVQoX6HLV",
    "Ethereum": "0x000000000000a25d11d75bdd1ebf1397db20bbc1",
    "Sui": "0x83ff02bcf7990804885926b199a63eb43481b85ac400e96136fa9126558ab6fd",
    "Aptos": "0x34718c95e4f204739ebe79f01fd51825baaab6db96c89a4e28cd43dad19e3aaa",
    "Osmosis": "osmo1273g3uh6fwpmpu8fl8zla7tgue62a2dvq3gdx5",
    "Terra": "terra12fxvvhvjlnwsxtnpaae6a9dg6gfy5kszkug4js",
    "Injective": "inj1fsf3ez4clt5s3v2gmtpsllwekqrumlffe49sjk",
    "Algorand": "WV6AGN7MGGQ7ZBDTXRNGQ2LMWYXS2I4LTPLWA4M2RXFLAYGRIQSJVNOD2M",
}

_ENV_KEYS = (
    "REPLAY_DEPLOYMENT",
    "MAINNET_FLATFILE_URL",
    "MAINNET_RECEIPT_PROGRAM_ID",
    "MAINNET_MINT",
    "MAINNET_TOKEN_PROGRAM_ID",
    "MAINNET_ATA_PROGRAM_ID",
)


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    """Isolate every test from the caller's environment and the config cache."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    DeploymentConfig._deployments_cache = None
    yield
    DeploymentConfig._deployments_cache = None


@pytest.fixture
def deployment():
    """The packaged mainnet deployment"""
    return DeploymentConfig.get_deployment("mainnet")


@pytest.fixture
def receipt_program():
    return decode_pubkey(TEST_RECEIPT_PROGRAM)


@pytest.fixture
def mock_flat_file(requests_mock):
    """Serve TEST_PREIMAGE_HEX for every identity on the flat-file store"""
    def response_callback(request, context):
        context.headers['Content-Type'] = 'application/json'
        return {"preimage": TEST_PREIMAGE_HEX, "amount": "1000"}

    return requests_mock.get(
        FLAT_FILE_URL_RE,
        json=response_callback,
        status_code=200
    )
