"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Mock chain client (ChainClient protocol)
- ContractManager and PaymentProcessor wired to the mock client
- Transaction tracker with a recording listener
"""

from unittest.mock import AsyncMock

import pytest

from monadpay.models import TransactionReceipt
from monadpay.services.batch import BatchAggregator
from monadpay.services.blockchain import ContractManager, PaymentProcessor
from monadpay.services.lifecycle import TransactionTracker


PROCESSOR_ADDRESS = "0x71065d406B5Ee090A98AE00ef197a23Bf9cD1b64"


@pytest.fixture
def mock_chain_client(sample_transaction_hash):
    """
    Mock chain client that accepts every submission.

    Defaults:
    - submit returns sample_transaction_hash
    - wait_for_receipt returns a successful receipt in block 12345

    Returns:
        AsyncMock: Mocked ChainClient
    """
    client = AsyncMock()
    client.submit = AsyncMock(return_value=sample_transaction_hash)
    client.wait_for_receipt = AsyncMock(
        return_value=TransactionReceipt(
            tx_hash=sample_transaction_hash,
            success=True,
            block_number=12345,
            gas_used=21000,
        )
    )
    client.call = AsyncMock()
    return client


@pytest.fixture
def contracts():
    """ContractManager bound to the default processor address."""
    return ContractManager(PROCESSOR_ADDRESS)


@pytest.fixture
def processor(mock_chain_client, contracts):
    """PaymentProcessor wired to the mock chain client."""
    return PaymentProcessor(mock_chain_client, contracts, BatchAggregator())


@pytest.fixture
def tracker():
    """Fresh idle tracker."""
    return TransactionTracker()


@pytest.fixture
def recorded_states(tracker):
    """
    States published by the tracker fixture, in order.

    Returns:
        list: TransactionState snapshots
    """
    states = []
    tracker.subscribe(states.append)
    return states
