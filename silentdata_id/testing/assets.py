"""Assets and opt-ins used by contract tests."""
from __future__ import annotations

import os
import random
from typing import Optional

from algosdk import transaction

from ..accounts import Account
from ..errors import IdentityAppError
from ..transactions import LedgerNode, submit_and_wait
from .accounts import AccountPool


def create_dummy_asset(
    node: LedgerNode,
    pool: AccountPool,
    total: int,
    account: Optional[Account] = None,
) -> int:
    """Create a throwaway asset managed entirely by ``account``."""

    if account is None:
        account = pool.get_temporary_account()

    number = random.randrange(1000)
    txn = transaction.AssetCreateTxn(
        account.address,
        node.suggested_params(),
        total=total,
        decimals=0,
        default_frozen=False,
        manager=account.address,
        reserve=account.address,
        freeze=account.address,
        clawback=account.address,
        unit_name=str(number),
        asset_name=f"Dummy {number}",
        url=f"https://dummy.asset/{number}",
        # random note so repeated creations are not rejected as duplicates
        note=os.urandom(20),
    )

    response = submit_and_wait(node, [account.sign(txn)])
    if not response.asset_index:
        raise IdentityAppError(
            "Error creating asset", "ASSET_CREATION_FAILED", {"tx_id": response.transaction_id}
        )
    return response.asset_index
