"""Static configuration for the identity application and node connections."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from .accounts import Account
from .errors import IdentityAppError

SANDBOX_TOKEN = "a" * 64


@dataclass(frozen=True, slots=True)
class IdAppState:
    global_byte_slices: int = 2
    global_ints: int = 1
    local_byte_slices: int = 0
    local_ints: int = 1


@dataclass(frozen=True, slots=True)
class IdentityAppConfig:
    id_app_state: IdAppState = field(default_factory=IdAppState)
    kyc_check_hash: str = "1561ade0621c5acf44b780521f95a1e0b19b4e5032945b860c4032fc28a3a23b"
    id_app_minimum_balance: int = 200_000
    minimum_transaction_fee: int = 1_000
    verify_fee: int = 3_000

    @property
    def check_hash(self) -> bytes:
        return bytes.fromhex(self.kyc_check_hash)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "IdentityAppConfig":
        """Build a config from the upper-case keys used by deployment files."""

        defaults = cls()
        state = values.get("ID_APP_STATE") or {}
        id_app_state = IdAppState(
            global_byte_slices=int(state.get("GLOBAL_BYTE_SLICES", defaults.id_app_state.global_byte_slices)),
            global_ints=int(state.get("GLOBAL_INTS", defaults.id_app_state.global_ints)),
            local_byte_slices=int(state.get("LOCAL_BYTE_SLICES", defaults.id_app_state.local_byte_slices)),
            local_ints=int(state.get("LOCAL_INTS", defaults.id_app_state.local_ints)),
        )
        return cls(
            id_app_state=id_app_state,
            kyc_check_hash=str(values.get("KYC_CHECK_HASH", defaults.kyc_check_hash)),
            id_app_minimum_balance=int(values.get("ID_APP_MINIMUM_BALANCE", defaults.id_app_minimum_balance)),
            minimum_transaction_fee=int(
                values.get("MINIMUM_TRANSACTION_FEE", defaults.minimum_transaction_fee)
            ),
            verify_fee=int(values.get("VERIFY_FEE", defaults.verify_fee)),
        )


def load_config(path: Optional[str | Path] = None) -> IdentityAppConfig:
    """Load an :class:`IdentityAppConfig`, overriding defaults from a JSON file."""

    if path is None:
        return IdentityAppConfig()
    with open(path, "r", encoding="utf-8") as handle:
        values = json.load(handle)
    if not isinstance(values, Mapping):
        raise IdentityAppError(
            "Configuration file must contain a JSON object",
            "INVALID_CONFIG",
            {"path": str(path)},
        )
    return IdentityAppConfig.from_mapping(values)


def get_env_var(
    name: str, default: Optional[str] = None, env: Optional[Mapping[str, str]] = None
) -> str:
    environ = os.environ if env is None else env
    value = environ.get(name)
    if value is not None:
        return value
    if default is not None:
        return default
    raise IdentityAppError.missing_env_var_error(name)


@dataclass(frozen=True, slots=True)
class ServiceSettings:
    server: str
    port: str
    token: str

    @property
    def base_url(self) -> str:
        server = self.server.rstrip("/")
        return f"{server}:{self.port}" if self.port else server


@dataclass(frozen=True, slots=True)
class NodeSettings:
    algod: ServiceSettings = field(
        default_factory=lambda: ServiceSettings("http://localhost", "4001", SANDBOX_TOKEN)
    )
    kmd: ServiceSettings = field(
        default_factory=lambda: ServiceSettings("http://localhost", "4002", SANDBOX_TOKEN)
    )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "NodeSettings":
        return cls(
            algod=ServiceSettings(
                get_env_var("ALGOD_SERVER", "http://localhost", env),
                get_env_var("ALGOD_PORT", "4001", env),
                get_env_var("ALGOD_TOKEN", SANDBOX_TOKEN, env),
            ),
            kmd=ServiceSettings(
                get_env_var("KMD_SERVER", "http://localhost", env),
                get_env_var("KMD_PORT", "4002", env),
                get_env_var("KMD_TOKEN", SANDBOX_TOKEN, env),
            ),
        )


def load_creator_account(env: Optional[Mapping[str, str]] = None) -> Optional[Account]:
    """Return the creator account from ``CREATOR_MNEMONIC``.

    ``None`` means a fresh account should be generated, which must be
    requested explicitly with ``GENERATE_CREATOR_ACCOUNT=true``.
    """

    creator_mnemonic = get_env_var("CREATOR_MNEMONIC", "", env)
    generate_account = get_env_var("GENERATE_CREATOR_ACCOUNT", "false", env) == "true"

    if not creator_mnemonic and not generate_account:
        raise IdentityAppError(
            "Environment variable CREATOR_MNEMONIC not set. "
            "Set it or use GENERATE_CREATOR_ACCOUNT=true to generate a creator account for testing.",
            "MISSING_ENV_VAR",
            {"name": "CREATOR_MNEMONIC"},
        )
    if creator_mnemonic and generate_account:
        raise IdentityAppError(
            "Environment variable CREATOR_MNEMONIC is set but GENERATE_CREATOR_ACCOUNT is enabled.",
            "CONFLICTING_ENV_VARS",
            {"names": ["CREATOR_MNEMONIC", "GENERATE_CREATOR_ACCOUNT"]},
        )

    if creator_mnemonic:
        return Account.from_mnemonic(creator_mnemonic)
    return None


def load_enclave_public_key(env: Optional[Mapping[str, str]] = None) -> bytes:
    return bytes.fromhex(get_env_var("ENCLAVE_PUBLIC_KEY", env=env))
