"""Identity verification calls against a deployed application."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from algosdk import logic, transaction

from .accounts import Account
from .config import IdentityAppConfig
from .errors import IdentityAppError
from .pending_transaction import PendingTransactionResult
from .retry import RetryPolicy
from .transactions import LedgerNode, make_fund_txn, submit_and_wait
from .tx_waiter import DEFAULT_TIMEOUT_ROUNDS

VERIFY_ARG = b"verify"
FUND_TXN_COUNT = 5


@dataclass(slots=True)
class Verifier:
    node: LedgerNode
    config: IdentityAppConfig = field(default_factory=IdentityAppConfig)
    wait_timeout: int = DEFAULT_TIMEOUT_ROUNDS
    retry_policy: Optional[RetryPolicy] = None

    def get_app_token(self, app_id: int) -> int:
        """Return the id of the single token created by the application account."""

        app_info = self.node.account_info(logic.get_application_address(app_id))
        app_tokens = app_info.get("created-assets") or []
        if len(app_tokens) != 1:
            raise IdentityAppError(
                "Invalid number of application tokens",
                "INVALID_APP_TOKENS",
                {"app_id": app_id, "count": len(app_tokens)},
            )
        return int(app_tokens[0]["index"])

    def verify_identity(
        self, app_id: int, sender: Account, data: bytes, signature: bytes
    ) -> PendingTransactionResult:
        """Submit a certificate and its enclave signature to the application.

        The ``verify`` call is grouped with ``fund`` calls whose flat fees pay
        for the inner transactions of the verification.
        """

        params = copy.copy(self.node.suggested_params())
        params.flat_fee = True
        params.fee = self.config.verify_fee

        asset_id = self.get_app_token(app_id)

        verify_txn = transaction.ApplicationNoOpTxn(
            sender.address,
            params,
            app_id,
            app_args=[VERIFY_ARG, bytes(data), bytes(signature)],
            foreign_assets=[asset_id],
        )
        fund_txns = [make_fund_txn(sender, app_id, params) for _ in range(FUND_TXN_COUNT)]

        group = [verify_txn, *fund_txns]
        transaction.assign_group_id(group)
        signed = [sender.sign(txn) for txn in group]

        return submit_and_wait(self.node, signed, self.wait_timeout, self.retry_policy)
