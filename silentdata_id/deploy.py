"""Deployment, setup and key rotation of the identity application."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from algosdk import logic, transaction

from .accounts import Account
from .config import IdentityAppConfig
from .contracts import DEFAULT_CONTRACTS_DIR, CompilerNode, get_contracts
from .errors import IdentityAppError
from .pending_transaction import PendingTransactionResult
from .retry import RetryPolicy
from .transactions import LedgerNode, submit_and_wait
from .tx_waiter import DEFAULT_TIMEOUT_ROUNDS
from .types.results import CompiledContracts, CreateAppResult

logger = logging.getLogger(__name__)

SETUP_ARG = b"setup"
SET_KEY_ARG = b"set_key"


class DeployNode(LedgerNode, CompilerNode, Protocol):
    pass


@dataclass(slots=True)
class Deployer:
    node: DeployNode
    config: IdentityAppConfig = field(default_factory=IdentityAppConfig)
    contracts_dir: Path = DEFAULT_CONTRACTS_DIR
    wait_timeout: int = DEFAULT_TIMEOUT_ROUNDS
    retry_policy: Optional[RetryPolicy] = None

    def get_contracts(self) -> CompiledContracts:
        return get_contracts(self.node, self.contracts_dir)

    def _submit(self, *signed: transaction.SignedTransaction) -> PendingTransactionResult:
        return submit_and_wait(self.node, list(signed), self.wait_timeout, self.retry_policy)

    def create_identity_app(self, sender: Account, enclave_public_key: bytes) -> CreateAppResult:
        contracts = self.get_contracts()
        state = self.config.id_app_state

        txn = transaction.ApplicationCreateTxn(
            sender.address,
            self.node.suggested_params(),
            transaction.OnComplete.NoOpOC,
            contracts.approval,
            contracts.clear_state,
            transaction.StateSchema(num_uints=state.global_ints, num_byte_slices=state.global_byte_slices),
            transaction.StateSchema(num_uints=state.local_ints, num_byte_slices=state.local_byte_slices),
            app_args=[bytes(enclave_public_key), self.config.check_hash],
        )

        response = self._submit(sender.sign(txn))
        if not response.application_index:
            raise IdentityAppError.invalid_response_error(
                "no application index in confirmed transaction",
                {"tx_id": response.transaction_id},
            )

        logger.info("Created identity application %d", response.application_index)
        return CreateAppResult(app_id=response.application_index, program_hash=contracts.program_hash)

    def setup_identity_app(self, sender: Account, app_id: int) -> int:
        """Fund the application account and make the ``setup`` call in one group."""

        params = self.node.suggested_params()
        fund_app_txn = transaction.PaymentTxn(
            sender.address,
            params,
            logic.get_application_address(app_id),
            self.config.id_app_minimum_balance + self.config.minimum_transaction_fee,
        )
        setup_txn = transaction.ApplicationNoOpTxn(
            sender.address, params, app_id, app_args=[SETUP_ARG]
        )

        transaction.assign_group_id([fund_app_txn, setup_txn])
        self._submit(sender.sign(fund_app_txn), sender.sign(setup_txn))
        return app_id

    def set_key(self, sender: Account, app_id: int, enclave_public_key: bytes) -> int:
        txn = transaction.ApplicationNoOpTxn(
            sender.address,
            self.node.suggested_params(),
            app_id,
            app_args=[SET_KEY_ARG, bytes(enclave_public_key)],
        )
        self._submit(sender.sign(txn))
        logger.info("Rotated enclave key of application %d", app_id)
        return app_id
