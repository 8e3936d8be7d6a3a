"""
Blockchain collaborator.

- core_constants.py - processor and ERC-20 ABIs
- contract_manager.py - builds contract calls
- chain_client.py - submits calls and waits for receipts
- payment_processor.py - orchestrates payments through a tracker
"""

from .chain_client import ChainClient, Web3ChainClient
from .contract_manager import ContractManager
from .core_constants import ERC20_ABI, PROCESSOR_ABI
from .payment_processor import PaymentProcessor


__all__ = [
    "ChainClient",
    "Web3ChainClient",
    "ContractManager",
    "PaymentProcessor",
    "PROCESSOR_ABI",
    "ERC20_ABI",
]
