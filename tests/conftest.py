from __future__ import annotations

import base64

import pytest
from algosdk import transaction

from silentdata_id.accounts import Account

GENESIS_HASH = "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI="


def make_suggested_params(fee: int = 0) -> transaction.SuggestedParams:
    return transaction.SuggestedParams(fee, 1, 1001, GENESIS_HASH, "sandnet-v1", False, None, 1000)


class FakeLedger:
    """In-memory node that confirms every submission in the next round."""

    def __init__(self, *, last_round: int = 100, confirmation=None, accounts=None) -> None:
        self.last_round = last_round
        self.confirmation = confirmation or {}
        self.accounts = accounts or {}
        self.submissions = []
        self.compiled = []
        self.program_address = Account.generate().address

    def suggested_params(self):
        return make_suggested_params()

    def send_transactions(self, signed_txns):
        self.submissions.append(list(signed_txns))
        return signed_txns[0].get_txid()

    def status(self):
        return {"last-round": self.last_round}

    def pending_transaction_info(self, tx_id):
        return {"confirmed-round": self.last_round + 1, "pool-error": "", **self.confirmation}

    def status_after_block(self, round_num):
        self.last_round = round_num
        return {"last-round": round_num}

    def compile(self, source):
        self.compiled.append(source)
        return {"result": base64.b64encode(b"compiled:" + source).decode(), "hash": self.program_address}

    def account_info(self, address):
        return self.accounts.get(address, {"amount": 0})


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def sender():
    return Account.generate()
