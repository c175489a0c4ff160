"""Transaction builders and submission helpers."""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional, Protocol, Sequence

from algosdk import transaction

from .accounts import Account
from .pending_transaction import PendingTransactionResult
from .retry import RetryPolicy
from .tx_waiter import DEFAULT_TIMEOUT_ROUNDS, NodeQuery, wait_for_transaction

logger = logging.getLogger(__name__)

FUND_ARG = b"fund"


class LedgerNode(NodeQuery, Protocol):
    def suggested_params(self) -> transaction.SuggestedParams:
        ...

    def send_transactions(self, signed_txns: Sequence[transaction.SignedTransaction]) -> str:
        ...

    def account_info(self, address: str) -> Mapping[str, Any]:
        ...


def submit_and_wait(
    node: LedgerNode,
    signed_txns: Sequence[transaction.SignedTransaction],
    timeout: int = DEFAULT_TIMEOUT_ROUNDS,
    retry_policy: Optional[RetryPolicy] = None,
) -> PendingTransactionResult:
    """Send ``signed_txns`` as one submission and wait for the first to confirm."""

    tx_id = node.send_transactions(signed_txns)
    result = wait_for_transaction(node, tx_id, timeout, retry_policy)
    logger.info("Transaction %s confirmed in round %s", tx_id, result.confirmed_round)
    return result


def make_fund_txn(
    sender: Account, app_id: int, suggested_params: transaction.SuggestedParams
) -> transaction.ApplicationNoOpTxn:
    """Build a ``fund`` application call; the random note keeps copies distinct."""

    return transaction.ApplicationNoOpTxn(
        sender.address,
        suggested_params,
        app_id,
        app_args=[FUND_ARG],
        note=os.urandom(32),
    )


def make_asset_transfer_txn(
    from_address: str,
    to_address: str,
    asset_id: int,
    amount: int,
    suggested_params: transaction.SuggestedParams,
    **overrides: Any,
) -> transaction.AssetTransferTxn:
    kwargs: dict = {
        "sender": from_address,
        "sp": suggested_params,
        "receiver": to_address,
        "amt": amount,
        "index": asset_id,
    }
    kwargs.update(overrides)
    return transaction.AssetTransferTxn(**kwargs)


def transfer_asset(
    node: LedgerNode,
    sender: Account,
    to_address: str,
    asset_id: int,
    amount: int = 1,
) -> str:
    params = node.suggested_params()
    txn = make_asset_transfer_txn(sender.address, to_address, asset_id, amount, params)
    result = submit_and_wait(node, [sender.sign(txn)])
    return result.transaction_id
