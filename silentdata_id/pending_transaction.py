"""Representation of a node's pending-transaction response."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class PendingTransactionResult:
    """Snapshot of ``/v2/transactions/pending/{txid}`` for one transaction."""

    transaction_id: str
    pool_error: Optional[str] = None
    txn: Optional[Mapping[str, Any]] = None
    application_index: Optional[int] = None
    asset_index: Optional[int] = None
    close_rewards: Optional[int] = None
    closing_amount: Optional[int] = None
    confirmed_round: Optional[int] = None
    global_state_delta: Optional[Any] = None
    local_state_delta: Optional[Any] = None
    receiver_rewards: Optional[int] = None
    sender_rewards: Optional[int] = None
    inner_txns: Tuple["PendingTransactionResult", ...] = field(default_factory=tuple)

    @classmethod
    def from_response(
        cls, transaction_id: str, response: Mapping[str, Any]
    ) -> "PendingTransactionResult":
        inner = tuple(
            cls.from_response(transaction_id, item)
            for item in response.get("inner-txns") or ()
            if isinstance(item, Mapping)
        )
        return cls(
            transaction_id=transaction_id,
            pool_error=response.get("pool-error") or None,
            txn=response.get("txn"),
            application_index=response.get("application-index"),
            asset_index=response.get("asset-index"),
            close_rewards=response.get("close-rewards"),
            closing_amount=response.get("closing-amount"),
            confirmed_round=response.get("confirmed-round"),
            global_state_delta=response.get("global-state-delta"),
            local_state_delta=response.get("local-state-delta"),
            receiver_rewards=response.get("receiver-rewards"),
            sender_rewards=response.get("sender-rewards"),
            inner_txns=inner,
        )

    @property
    def is_confirmed(self) -> bool:
        return bool(self.confirmed_round and self.confirmed_round > 0)
