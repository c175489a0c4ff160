"""Generate a new account and print its address, public key and mnemonic."""
from silentdata_id import Account


def main() -> None:
    account = Account.generate()
    print("Address:", account.address)
    print("Public key:", account.public_key.hex())
    print("Mnemonic:", account.to_mnemonic())


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
