"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for tests; values match the built-in defaults
os.environ.setdefault("RPC_URL", "https://testnet-rpc.monad.xyz")
os.environ.setdefault("CHAIN_ID", "10143")
os.environ.setdefault("DEEP_LINK_SCHEME", "monadpay")
os.environ.setdefault("WEB_BASE_URL", "http://localhost:3000")
os.environ.setdefault("PROCESSOR_CONTRACT_ADDRESS", "0x71065d406B5Ee090A98AE00ef197a23Bf9cD1b64")
os.environ.setdefault("USDC_TOKEN_ADDRESS", "0xd9C73AF78191Be2C3088FB8755a3374779E3c727")
os.environ.setdefault("USDT_TOKEN_ADDRESS", "0x9487B62cE77FCA8BBa0152642E085FF716e1e876")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def sample_wallet_address():
    """Sample valid wallet address for testing."""
    return "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"


@pytest.fixture
def second_wallet_address():
    """Second valid wallet address for batch tests."""
    return "0x92F6D61C4D88F6Df0dBC260a594681F82347F840"


@pytest.fixture
def sample_transaction_hash():
    """Sample transaction hash for testing."""
    return "0x1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"


@pytest.fixture
def usdc_address():
    """Mock USDC token address."""
    return "0xd9C73AF78191Be2C3088FB8755a3374779E3c727"
