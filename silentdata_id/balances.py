"""Account balance queries."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol

ALGO_ASSET_ID = 0


class AccountNode(Protocol):
    def account_info(self, address: str) -> Mapping[str, Any]:
        ...


def get_balances(node: AccountNode, address: str) -> Dict[int, int]:
    """Return ``{asset_id: amount}``, with the native balance under key ``0``."""

    account_info = node.account_info(address)
    balances: Dict[int, int] = {ALGO_ASSET_ID: int(account_info.get("amount", 0))}
    for holding in account_info.get("assets") or []:
        balances[int(holding["asset-id"])] = int(holding["amount"])
    return balances
