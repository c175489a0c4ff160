"""Dataclasses describing common results returned by the client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class CompiledProgram:
    program: bytes
    program_hash: bytes


@dataclass(frozen=True, slots=True)
class CompiledContracts:
    approval: bytes
    clear_state: bytes
    program_hash: bytes


@dataclass(frozen=True, slots=True)
class CreateAppResult:
    app_id: int
    program_hash: bytes


@dataclass(frozen=True, slots=True)
class BlockTimestamp:
    block: Mapping[str, Any]
    timestamp: int
