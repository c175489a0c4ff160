"""Identity certificates and enclave signatures for contract tests."""
from __future__ import annotations

import time
from typing import Any, Dict, Optional

import cbor2
from nacl.signing import SigningKey

from ..accounts import Account
from ..config import IdentityAppConfig

# fixed seed keeps enclave keys reproducible across runs
DEFAULT_ENCLAVE_SEED = bytes(32)
DEFAULT_PROOF_ID = "123e4567-e89b-12d3-a456-426614174000"
PROGRAM_DATA_PREFIX = b"ProgData"
ONE_DAY = 60 * 60 * 24


def get_test_enclave_keys(seed: bytes = DEFAULT_ENCLAVE_SEED) -> SigningKey:
    return SigningKey(seed)


def enclave_public_key(keys: SigningKey) -> bytes:
    return bytes(keys.verify_key)


def create_identity_certificate(
    subject: Account,
    check_hash: Optional[bytes] = None,
    now: Optional[int] = None,
    **overrides: Any,
) -> bytes:
    """Encode a CBOR identity certificate for ``subject``.

    Fields default to a valid certificate issued a day ago; any field can be
    replaced through ``overrides``.
    """

    issued = int(time.time() if now is None else now) - ONE_DAY
    certificate: Dict[str, Any] = {
        "check_hash": check_hash if check_hash is not None else IdentityAppConfig().check_hash,
        "id": DEFAULT_PROOF_ID,
        "timestamp": issued,
        "check_timestamp": issued,
        "subject_id": bytes(32),
        "initiator_pkey": subject.public_key,
    }
    certificate.update(overrides)
    return cbor2.dumps(certificate)


def get_certificate_data_signature(
    program_hash: bytes, certificate: bytes, keys: SigningKey
) -> bytes:
    to_sign = PROGRAM_DATA_PREFIX + bytes(program_hash) + bytes(certificate)
    return keys.sign(to_sign).signature
