"""
Transaction lifecycle tracker.

One tracker per submitted transaction. It records status transitions
reported by the chain collaborator and publishes an immutable snapshot to
subscribed listeners on every change. The tracker never polls, times out
or retries on its own.

Transitions:
    idle -> awaiting_wallet_approval          begin()
    awaiting_wallet_approval -> broadcast     on_hash()
    broadcast -> confirming                   on_confirming()
    broadcast | confirming -> confirmed       on_receipt(success)
    broadcast | confirming -> failed          on_receipt(reverted)
    any pending state -> failed               on_error()
    any -> idle                               reset()
"""

from collections.abc import Callable

from loguru import logger

from monadpay.models import TransactionReceipt, TransactionState, TransactionStatus
from monadpay.utils.exceptions import TransactionStateError
from monadpay.utils.security import mask_hash


Listener = Callable[[TransactionState], None]

REVERTED_ERROR = "Transaction reverted"


class TransactionTracker:
    """
    State machine for a single transaction.

    Once confirmed or failed the tracker is frozen: further notifications
    are ignored and hash/error stay as they were. Only reset() leaves a
    terminal state.
    """

    def __init__(self) -> None:
        self._state = TransactionState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def status(self) -> TransactionStatus:
        return self._state.status

    @property
    def hash(self) -> str | None:
        return self._state.hash

    @property
    def error(self) -> str | None:
        return self._state.error

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for state snapshots.

        Args:
            listener: Called synchronously with each new TransactionState

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: TransactionState) -> None:
        previous = self._state.status
        self._state = state
        logger.info(
            f"Transaction {mask_hash(state.hash)}: {previous} -> {state.status}"
        )
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error(f"Transaction listener failed: {e}")

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _ignored_when_terminal(self, event: str) -> bool:
        if self._state.is_terminal:
            logger.debug(
                f"Ignoring {event} for {self._state.status} transaction "
                f"{mask_hash(self._state.hash)}"
            )
            return True
        return False

    def _require(self, event: str, *allowed: TransactionStatus) -> None:
        if self._state.status not in allowed:
            raise TransactionStateError(
                f"Cannot apply {event} in state {self._state.status}",
                code="ILLEGAL_TRANSITION",
            )

    def begin(self) -> None:
        """Submission started; waiting for the wallet to sign."""
        if self._ignored_when_terminal("begin"):
            return
        self._require("begin", TransactionStatus.IDLE)
        self._publish(TransactionState(status=TransactionStatus.AWAITING_WALLET_APPROVAL))

    def on_hash(self, tx_hash: str) -> None:
        """
        Wallet approved and the transaction was broadcast.

        Args:
            tx_hash: Transaction hash assigned by the network
        """
        if self._ignored_when_terminal("hash"):
            return
        if self._state.hash == tx_hash and self._state.is_confirming:
            return
        self._require("hash", TransactionStatus.AWAITING_WALLET_APPROVAL)
        self._publish(
            self._state.model_copy(
                update={"status": TransactionStatus.BROADCAST, "hash": tx_hash}
            )
        )

    def on_confirming(self) -> None:
        """Collaborator started watching for the receipt."""
        if self._ignored_when_terminal("confirming"):
            return
        if self._state.status == TransactionStatus.CONFIRMING:
            return
        self._require("confirming", TransactionStatus.BROADCAST)
        self._publish(self._state.model_copy(update={"status": TransactionStatus.CONFIRMING}))

    def on_receipt(self, receipt: TransactionReceipt) -> None:
        """
        Receipt observed.

        Args:
            receipt: Mined transaction outcome
        """
        if self._ignored_when_terminal("receipt"):
            return
        self._require("receipt", TransactionStatus.BROADCAST, TransactionStatus.CONFIRMING)

        if receipt.success:
            update = {"status": TransactionStatus.CONFIRMED}
        else:
            update = {"status": TransactionStatus.FAILED, "error": REVERTED_ERROR}
        update["block_number"] = receipt.block_number
        update["gas_used"] = receipt.gas_used
        self._publish(self._state.model_copy(update=update))

    def on_error(self, message: str) -> None:
        """
        Wallet rejection or submission failure.

        Args:
            message: Human-readable failure reason
        """
        if self._ignored_when_terminal("error"):
            return
        self._require(
            "error",
            TransactionStatus.AWAITING_WALLET_APPROVAL,
            TransactionStatus.BROADCAST,
            TransactionStatus.CONFIRMING,
        )
        logger.error(f"Transaction {mask_hash(self._state.hash)} failed: {message}")
        self._publish(
            self._state.model_copy(update={"status": TransactionStatus.FAILED, "error": message})
        )

    def reset(self) -> None:
        """Return to idle, clearing hash, error and receipt data."""
        self._publish(TransactionState())
