"""Rotate the enclave key of a deployed identity application.

Environment: ALGOD_*, CREATOR_MNEMONIC, ENCLAVE_PUBLIC_KEY, SILENTDATA_ID_APP_ID.
"""
import logging
import sys

from silentdata_id import Account, SilentDataId
from silentdata_id.config import get_env_var, load_enclave_public_key


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    client = SilentDataId.from_env()

    creator = Account.from_mnemonic(get_env_var("CREATOR_MNEMONIC"))
    enclave_public_key = load_enclave_public_key()
    app_id = int(get_env_var("SILENTDATA_ID_APP_ID"))

    if "--dry-run" in sys.argv:
        print("This is a dry-run, not setting the key")
        return

    client.deployer.set_key(creator, app_id, enclave_public_key)
    print(f"Enclave key of application {app_id} set to {enclave_public_key.hex()}")


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
