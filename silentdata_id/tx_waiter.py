"""Utilities for waiting on submitted transactions to be confirmed."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

from .errors import IdentityAppError
from .pending_transaction import PendingTransactionResult
from .retry import RetryPolicy

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_ROUNDS = 10


class NodeQuery(Protocol):
    def status(self) -> Mapping[str, Any]:
        ...

    def pending_transaction_info(self, tx_id: str) -> Mapping[str, Any]:
        ...

    def status_after_block(self, round_num: int) -> Mapping[str, Any]:
        ...


class TransactionWaiter:
    """Polls a node round by round until one transaction is confirmed.

    A waiter is bound to a single transaction id. The pending-transaction
    query is retried through ``retry_policy``; pool errors and timeouts are
    raised as :class:`IdentityAppError` without any retry.
    """

    def __init__(
        self,
        node: NodeQuery,
        tx_id: str,
        timeout: int = DEFAULT_TIMEOUT_ROUNDS,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._node = node
        self.tx_id = tx_id
        self.timeout = timeout
        self._retry_policy = retry_policy or RetryPolicy()

    def _pending_info(self) -> Mapping[str, Any]:
        return self._retry_policy.call(lambda: self._node.pending_transaction_info(self.tx_id))

    def wait(self) -> PendingTransactionResult:
        start_round = int(self._node.status()["last-round"])
        current_round = start_round

        while current_round < start_round + self.timeout:
            pending = self._pending_info()

            confirmed_round = pending.get("confirmed-round") or 0
            if confirmed_round > 0:
                logger.debug("Transaction %s confirmed in round %d", self.tx_id, confirmed_round)
                return PendingTransactionResult.from_response(self.tx_id, pending)

            pool_error = pending.get("pool-error")
            if pool_error:
                raise IdentityAppError.pool_error(self.tx_id, pool_error)

            self._node.status_after_block(current_round + 1)
            current_round += 1

        raise IdentityAppError.transaction_wait_timeout_error(self.tx_id, self.timeout)


def wait_for_transaction(
    node: NodeQuery,
    tx_id: str,
    timeout: int = DEFAULT_TIMEOUT_ROUNDS,
    retry_policy: Optional[RetryPolicy] = None,
) -> PendingTransactionResult:
    """Block until ``tx_id`` is confirmed, rejected from the pool, or times out."""

    return TransactionWaiter(node, tx_id, timeout, retry_policy).wait()
