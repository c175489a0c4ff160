"""Deploy and set up the identity application on the configured node.

Environment: ALGOD_SERVER/ALGOD_PORT/ALGOD_TOKEN, ENCLAVE_PUBLIC_KEY and
either CREATOR_MNEMONIC or GENERATE_CREATOR_ACCOUNT=true.
"""
import logging
import sys

from silentdata_id import SilentDataId
from silentdata_id.config import load_creator_account, load_enclave_public_key
from silentdata_id.testing import AccountPool, GenesisAccounts


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    client = SilentDataId.from_env()

    creator = load_creator_account()
    if creator is None:
        pool = AccountPool(client.algod, GenesisAccounts(client.kmd))
        creator = pool.get_temporary_account()
        print("Generated creator mnemonic:", creator.to_mnemonic())
    enclave_public_key = load_enclave_public_key()

    print("Creator:", creator.address)
    if "--dry-run" in sys.argv:
        print("This is a dry-run, not creating & setting up the application")
        return

    result = client.deployer.create_identity_app(creator, enclave_public_key)
    print("Created application:", result.app_id)
    print("Program hash:", result.program_hash.hex())

    client.deployer.setup_identity_app(creator, result.app_id)
    print("Application set up")


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
