import dataclasses

import pytest

from silentdata_id.pending_transaction import PendingTransactionResult


def test_from_response_maps_node_fields():
    response = {
        "pool-error": "",
        "txn": {"sig": "abc", "txn": {"type": "appl"}},
        "application-index": 42,
        "confirmed-round": 1200,
        "global-state-delta": [{"key": "a2V5", "value": {"action": 2, "uint": 1}}],
        "sender-rewards": 0,
        "inner-txns": [{"asset-index": 77, "txn": {"txn": {"type": "acfg"}}}],
    }

    result = PendingTransactionResult.from_response("TXID", response)

    assert result.transaction_id == "TXID"
    assert result.pool_error is None
    assert result.application_index == 42
    assert result.asset_index is None
    assert result.confirmed_round == 1200
    assert result.is_confirmed
    assert result.global_state_delta[0]["key"] == "a2V5"
    assert len(result.inner_txns) == 1
    assert result.inner_txns[0].asset_index == 77


def test_unconfirmed_result():
    result = PendingTransactionResult.from_response("TXID", {"pool-error": "overspend"})

    assert result.pool_error == "overspend"
    assert not result.is_confirmed
    assert result.inner_txns == ()


def test_result_is_immutable():
    result = PendingTransactionResult.from_response("TXID", {"confirmed-round": 3})
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.confirmed_round = 4  # type: ignore[misc]
