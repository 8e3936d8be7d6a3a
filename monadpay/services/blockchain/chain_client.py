"""
Chain interaction collaborator.

ChainClient is the boundary between payment orchestration and the
network: it submits prepared contract calls, waits for receipts and
performs view calls. Web3ChainClient implements it on AsyncWeb3 with a
local eth_account signer.
"""

import asyncio
from typing import Any, Protocol

from eth_account import Account
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception

from monadpay.config.settings import settings
from monadpay.models import ContractCall, TransactionReceipt
from monadpay.utils.exceptions import ReceiptTimeoutError, SubmissionError
from monadpay.utils.security import mask_address, mask_hash


class ChainClient(Protocol):
    """Operations the payment processor needs from the network."""

    async def submit(self, call: ContractCall) -> str:
        """Sign and broadcast a call; return the transaction hash."""
        ...

    async def wait_for_receipt(self, tx_hash: str) -> TransactionReceipt:
        """Wait until the transaction is mined."""
        ...

    async def call(self, call: ContractCall) -> Any:
        """Execute a read-only call."""
        ...


class Web3ChainClient:
    """
    ChainClient backed by AsyncWeb3.

    Features:
    - Transaction building with automatic gas and fee estimation
    - Local signing with eth_account
    - Nonce serialization for concurrent submissions
    - Receipt waiting with a bounded timeout
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        private_key: str | None = None,
        chain_id: int | None = None,
        rpc_timeout: float = 30,
        receipt_timeout: float = 120.0,
        poll_latency: float = 0.5,
    ) -> None:
        """
        Initialize chain client.

        Args:
            web3: AsyncWeb3 instance
            private_key: Signing key; submissions fail without it
            chain_id: Chain id stamped on transactions (None = ask the node)
            rpc_timeout: Timeout for single RPC requests (seconds)
            receipt_timeout: How long to wait for a receipt (seconds)
            poll_latency: Receipt poll interval (seconds)
        """
        self.web3 = web3
        self.chain_id = chain_id
        self.rpc_timeout = rpc_timeout
        self.receipt_timeout = receipt_timeout
        self.poll_latency = poll_latency

        self._private_key = private_key
        self._address: str | None = None
        self._nonce_lock = asyncio.Lock()

        if private_key:
            self._address = Account.from_key(private_key).address
            logger.info(f"Chain client initialized with wallet {mask_address(self._address)}")
        else:
            logger.warning("Chain client initialized without private key - submissions will fail")

    @classmethod
    def from_settings(cls) -> "Web3ChainClient":
        web3 = AsyncWeb3(AsyncHTTPProvider(settings.rpc_url))
        return cls(
            web3=web3,
            private_key=settings.wallet_private_key,
            chain_id=settings.chain_id,
            rpc_timeout=settings.rpc_timeout,
            receipt_timeout=settings.receipt_timeout,
            poll_latency=settings.receipt_poll_latency,
        )

    @property
    def address(self) -> str | None:
        """Signer address, if a key is configured."""
        return self._address

    def _function(self, call: ContractCall) -> Any:
        contract = self.web3.eth.contract(
            address=self.web3.to_checksum_address(call.address),
            abi=call.abi,
        )
        return getattr(contract.functions, call.function_name)(*call.args)

    async def _rpc(self, awaitable: Any, action: str) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.rpc_timeout)
        except TimeoutError as e:
            logger.error(f"Timeout {action}")
            raise SubmissionError(f"Timeout {action}", "RPC_TIMEOUT") from e

    async def submit(self, call: ContractCall) -> str:
        """
        Build, sign and broadcast a contract call.

        Args:
            call: Prepared contract call

        Returns:
            Transaction hash (0x-prefixed hex)

        Raises:
            SubmissionError: If no key is configured, the call reverts
                during estimation, or the node rejects the transaction
        """
        if not self._private_key or not self._address:
            raise SubmissionError("Private key not configured", "NO_SIGNER")

        try:
            function = self._function(call)

            async with self._nonce_lock:
                nonce = await self._rpc(
                    self.web3.eth.get_transaction_count(self._address, "pending"),
                    "getting nonce",
                )
                params: dict[str, Any] = {
                    "from": self._address,
                    "value": call.value,
                    "nonce": nonce,
                }
                if self.chain_id is not None:
                    params["chainId"] = self.chain_id

                transaction = await self._rpc(
                    function.build_transaction(params), "building transaction"
                )

                signed_tx = Account.from_key(self._private_key).sign_transaction(transaction)

                tx_hash = await self._rpc(
                    self.web3.eth.send_raw_transaction(signed_tx.raw_transaction),
                    "sending transaction",
                )

        except ContractLogicError as e:
            logger.error(f"{call.function_name} reverted during estimation: {e}")
            raise SubmissionError(f"Transaction would revert: {e}", "REVERTED") from e
        except (Web3Exception, ValueError, ConnectionError, OSError) as e:
            logger.error(f"Failed to submit {call.function_name}: {e}")
            raise SubmissionError(str(e), "RPC_ERROR") from e

        tx_hash_hex = self.web3.to_hex(tx_hash)
        logger.info(
            f"Transaction sent: {call.function_name} -> {mask_address(call.address)}, "
            f"hash={mask_hash(tx_hash_hex)}, value={call.value}"
        )
        return tx_hash_hex

    async def wait_for_receipt(self, tx_hash: str) -> TransactionReceipt:
        """
        Wait for a transaction to be mined.

        Args:
            tx_hash: Transaction hash

        Returns:
            TransactionReceipt

        Raises:
            ReceiptTimeoutError: If no receipt arrived in time (the
                transaction may still be pending)
            SubmissionError: On RPC failure
        """
        try:
            receipt = await asyncio.wait_for(
                self.web3.eth.wait_for_transaction_receipt(
                    tx_hash,
                    timeout=self.receipt_timeout,
                    poll_latency=self.poll_latency,
                ),
                timeout=self.receipt_timeout + self.rpc_timeout,
            )
        except (TimeExhausted, TimeoutError) as e:
            # Timeout does not mean the transaction failed
            logger.warning(
                f"Transaction {mask_hash(tx_hash)} confirmation timeout - "
                f"transaction may still be pending"
            )
            raise ReceiptTimeoutError(tx_hash, self.receipt_timeout) from e
        except (Web3Exception, ValueError, ConnectionError, OSError) as e:
            logger.error(f"Failed to get receipt for {mask_hash(tx_hash)}: {e}")
            raise SubmissionError(str(e), "RPC_ERROR") from e

        return TransactionReceipt(
            tx_hash=tx_hash,
            success=receipt["status"] == 1,
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
        )

    async def call(self, call: ContractCall) -> Any:
        """
        Execute a view function.

        Args:
            call: Prepared contract call

        Returns:
            Decoded return value

        Raises:
            SubmissionError: If the call fails
        """
        try:
            return await self._rpc(self._function(call).call(), f"calling {call.function_name}")
        except ContractLogicError as e:
            raise SubmissionError(f"{call.function_name} reverted: {e}", "REVERTED") from e
        except (Web3Exception, ValueError, ConnectionError, OSError) as e:
            logger.error(f"View call {call.function_name} failed: {e}")
            raise SubmissionError(str(e), "RPC_ERROR") from e
