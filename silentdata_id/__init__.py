"""Python client for deploying and calling the SILENTDATA-ID identity application."""
from .accounts import Account
from .algod import AlgodNode
from .client import SilentDataId, SilentDataIdOptions
from .config import IdentityAppConfig, NodeSettings
from .deploy import Deployer
from .errors import IdentityAppError
from .kmd import KmdNode
from .pending_transaction import PendingTransactionResult
from .retry import RetryPolicy
from .state import StateValue, StateValueType
from .tx_waiter import TransactionWaiter, wait_for_transaction
from .verify import Verifier

__all__ = [
    "Account",
    "AlgodNode",
    "Deployer",
    "IdentityAppConfig",
    "IdentityAppError",
    "KmdNode",
    "NodeSettings",
    "PendingTransactionResult",
    "RetryPolicy",
    "SilentDataId",
    "SilentDataIdOptions",
    "StateValue",
    "StateValueType",
    "TransactionWaiter",
    "Verifier",
    "wait_for_transaction",
]
