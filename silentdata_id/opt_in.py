"""Opt-in helpers for applications and assets."""
from __future__ import annotations

from algosdk import transaction

from .accounts import Account
from .pending_transaction import PendingTransactionResult
from .transactions import LedgerNode, submit_and_wait, transfer_asset


def opt_in_contract(node: LedgerNode, sender: Account, app_id: int) -> PendingTransactionResult:
    params = node.suggested_params()
    txn = transaction.ApplicationOptInTxn(sender.address, params, app_id)
    return submit_and_wait(node, [sender.sign(txn)])


def opt_in_asset(node: LedgerNode, sender: Account, asset_id: int) -> str:
    # a zero-amount transfer to self registers the holding
    return transfer_asset(node, sender, sender.address, asset_id, 0)
