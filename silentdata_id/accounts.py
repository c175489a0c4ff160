"""Signing accounts backed by ed25519 keys."""
from __future__ import annotations

from dataclasses import dataclass

from algosdk import account, encoding, mnemonic, transaction
from algosdk.atomic_transaction_composer import AccountTransactionSigner


@dataclass(frozen=True, slots=True)
class Account:
    """An address and the base64 private key that controls it."""

    address: str
    private_key: str

    @classmethod
    def generate(cls) -> "Account":
        private_key, address = account.generate_account()
        return cls(address, private_key)

    @classmethod
    def from_mnemonic(cls, words: str) -> "Account":
        private_key = mnemonic.to_private_key(words)
        return cls(account.address_from_private_key(private_key), private_key)

    @classmethod
    def from_private_key(cls, private_key: str) -> "Account":
        return cls(account.address_from_private_key(private_key), private_key)

    def to_mnemonic(self) -> str:
        return mnemonic.from_private_key(self.private_key)

    @property
    def public_key(self) -> bytes:
        return encoding.decode_address(self.address)

    def sign(self, txn: transaction.Transaction) -> transaction.SignedTransaction:
        (signed,) = AccountTransactionSigner(self.private_key).sign_transactions([txn], [0])
        return signed

    def __repr__(self) -> str:
        return f"Account(address={self.address!r})"
