"""Ledger clock helpers."""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from .types.results import BlockTimestamp


class BlockNode(Protocol):
    def status(self) -> Mapping[str, Any]:
        ...

    def block(self, round_num: int) -> Mapping[str, Any]:
        ...


def get_last_block_timestamp(node: BlockNode) -> BlockTimestamp:
    last_round = int(node.status()["last-round"])
    block = node.block(last_round)
    return BlockTimestamp(block=block, timestamp=int(block["block"]["ts"]))
