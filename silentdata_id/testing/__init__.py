"""Scaffolding for exercising a deployed identity application."""
from .accounts import AccountPool, GenesisAccounts, pay_account
from .assets import create_dummy_asset
from .certificates import (
    create_identity_certificate,
    enclave_public_key,
    get_certificate_data_signature,
    get_test_enclave_keys,
)

__all__ = [
    "AccountPool",
    "GenesisAccounts",
    "pay_account",
    "create_dummy_asset",
    "create_identity_certificate",
    "enclave_public_key",
    "get_certificate_data_signature",
    "get_test_enclave_keys",
]
