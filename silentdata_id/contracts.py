"""Remote compilation of the identity application programs."""
from __future__ import annotations

import base64
from pathlib import Path
from typing import Any, Mapping, Protocol

from algosdk import encoding

from .errors import IdentityAppError
from .types.results import CompiledContracts, CompiledProgram

APPROVAL_PROGRAM = "identity-approval.teal"
CLEAR_STATE_PROGRAM = "identity-clear.teal"
DEFAULT_CONTRACTS_DIR = Path("teal")


class CompilerNode(Protocol):
    def compile(self, source: bytes) -> Mapping[str, Any]:
        ...


def compile_contract_from_file(
    node: CompilerNode, file_name: str, contracts_dir: str | Path = DEFAULT_CONTRACTS_DIR
) -> CompiledProgram:
    path = Path(contracts_dir) / file_name
    try:
        source = path.read_bytes()
    except FileNotFoundError as exc:
        raise IdentityAppError(
            f"Contract source not found: {path}",
            "CONTRACT_NOT_FOUND",
            {"path": str(path)},
        ) from exc

    response = node.compile(source)
    try:
        program = base64.b64decode(response["result"])
        # hash is the SHA512/256 of the program, encoded as an address
        program_hash = encoding.decode_address(response["hash"])
    except (KeyError, TypeError) as exc:
        raise IdentityAppError.invalid_response_error("malformed compile response", response) from exc

    return CompiledProgram(program=program, program_hash=program_hash)


def get_contracts(
    node: CompilerNode, contracts_dir: str | Path = DEFAULT_CONTRACTS_DIR
) -> CompiledContracts:
    approval = compile_contract_from_file(node, APPROVAL_PROGRAM, contracts_dir)
    clear_state = compile_contract_from_file(node, CLEAR_STATE_PROGRAM, contracts_dir)
    return CompiledContracts(
        approval=approval.program,
        clear_state=clear_state.program,
        program_hash=approval.program_hash,
    )
