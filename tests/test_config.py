import json

import pytest

from silentdata_id.accounts import Account
from silentdata_id.config import (
    SANDBOX_TOKEN,
    IdentityAppConfig,
    NodeSettings,
    get_env_var,
    load_config,
    load_creator_account,
    load_enclave_public_key,
)
from silentdata_id.errors import IdentityAppError


def test_default_config_values():
    config = IdentityAppConfig()

    assert config.id_app_state.global_byte_slices == 2
    assert config.id_app_state.global_ints == 1
    assert config.id_app_state.local_byte_slices == 0
    assert config.id_app_state.local_ints == 1
    assert config.check_hash.hex() == config.kyc_check_hash
    assert len(config.check_hash) == 32
    assert config.id_app_minimum_balance == 200_000
    assert config.minimum_transaction_fee == 1_000
    assert config.verify_fee == 3_000


def test_load_config_overrides_from_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"VERIFY_FEE": 4000, "ID_APP_STATE": {"LOCAL_INTS": 2}}))

    config = load_config(path)

    assert config.verify_fee == 4000
    assert config.id_app_state.local_ints == 2
    assert config.id_app_state.global_byte_slices == 2
    assert config.minimum_transaction_fee == 1_000


def test_load_config_rejects_non_objects(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")

    with pytest.raises(IdentityAppError) as excinfo:
        load_config(path)
    assert excinfo.value.code == "INVALID_CONFIG"


def test_node_settings_from_env():
    settings = NodeSettings.from_env({"ALGOD_SERVER": "https://node.example/", "ALGOD_PORT": "", "KMD_TOKEN": "k"})

    assert settings.algod.base_url == "https://node.example"
    assert settings.algod.token == SANDBOX_TOKEN
    assert settings.kmd.base_url == "http://localhost:4002"
    assert settings.kmd.token == "k"


def test_get_env_var():
    assert get_env_var("NAME", env={"NAME": "value"}) == "value"
    assert get_env_var("NAME", "fallback", env={}) == "fallback"
    with pytest.raises(IdentityAppError) as excinfo:
        get_env_var("NAME", env={})
    assert excinfo.value.code == "MISSING_ENV_VAR"


def test_load_creator_account_from_mnemonic():
    account = Account.generate()

    creator = load_creator_account({"CREATOR_MNEMONIC": account.to_mnemonic()})

    assert creator == account


def test_load_creator_account_generate_flag():
    assert load_creator_account({"GENERATE_CREATOR_ACCOUNT": "true"}) is None


def test_load_creator_account_requires_a_choice():
    with pytest.raises(IdentityAppError) as excinfo:
        load_creator_account({})
    assert excinfo.value.code == "MISSING_ENV_VAR"

    with pytest.raises(IdentityAppError) as excinfo:
        load_creator_account(
            {"CREATOR_MNEMONIC": Account.generate().to_mnemonic(), "GENERATE_CREATOR_ACCOUNT": "true"}
        )
    assert excinfo.value.code == "CONFLICTING_ENV_VARS"


def test_load_enclave_public_key():
    assert load_enclave_public_key({"ENCLAVE_PUBLIC_KEY": "00ff"}) == b"\x00\xff"
