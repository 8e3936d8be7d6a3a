#!/usr/bin/env python3
"""
Check connection to the configured Monad RPC endpoint.

Prints chain id, current block, the payment processor counters and,
when WALLET_PRIVATE_KEY is set, the signer's balance.

Usage:
    python scripts/check_connection.py
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from eth_account import Account
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from monadpay.config.settings import settings
from monadpay.logging import setup_logging
from monadpay.services.blockchain import PaymentProcessor, Web3ChainClient
from monadpay.utils.exceptions import SubmissionError
from monadpay.utils.security import mask_address
from monadpay.utils.units import from_smallest_unit


# Configure logger
setup_logging()

# Balance below which deployment/testing is likely to run out of gas
LOW_BALANCE = Decimal("0.1")


async def check_connection() -> bool:
    logger.info(f"RPC URL: {settings.rpc_url}")
    web3 = AsyncWeb3(AsyncHTTPProvider(settings.rpc_url))

    try:
        chain_id = await asyncio.wait_for(web3.eth.chain_id, timeout=settings.rpc_timeout)
        block_number = await asyncio.wait_for(web3.eth.block_number, timeout=settings.rpc_timeout)
    except (TimeoutError, Web3Exception, ConnectionError, OSError) as e:
        logger.error(f"Connection failed: {e}")
        return False

    logger.info(f"Chain ID: {chain_id}")
    if chain_id != settings.chain_id:
        logger.warning(f"Configured CHAIN_ID is {settings.chain_id}")
    logger.info(f"Current block: {block_number}")

    processor = PaymentProcessor.from_settings(
        Web3ChainClient(web3, chain_id=chain_id, rpc_timeout=settings.rpc_timeout)
    )
    try:
        totals = await processor.fetch_totals()
    except SubmissionError as e:
        logger.error(
            f"Payment processor {mask_address(settings.processor_contract_address)} "
            f"is not readable: {e.message}"
        )
        return False
    logger.info(
        f"Processor totals: {totals.payments} payments, "
        f"{totals.payment_requests} requests, {totals.batch_payments} batches"
    )

    if settings.wallet_private_key:
        address = Account.from_key(settings.wallet_private_key).address
        balance_wei = await asyncio.wait_for(
            web3.eth.get_balance(address), timeout=settings.rpc_timeout
        )
        balance = from_smallest_unit(balance_wei)
        logger.info(f"Account: {address}")
        logger.info(f"Balance: {balance} MON")
        if balance < LOW_BALANCE:
            logger.warning("Low balance. Get testnet MON from the faucet.")

    logger.success("Connection successful!")
    return True


def main() -> None:
    ok = asyncio.run(check_connection())
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
