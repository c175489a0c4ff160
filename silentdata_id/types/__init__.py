"""Typed structures returned by the client."""
from .results import BlockTimestamp, CompiledContracts, CompiledProgram, CreateAppResult

__all__ = [
    "BlockTimestamp",
    "CompiledContracts",
    "CompiledProgram",
    "CreateAppResult",
]
