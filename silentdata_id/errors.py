"""Custom exceptions for the identity application client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class IdentityAppError(Exception):
    """Base exception raised by the identity application client."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def pool_error(cls, tx_id: str, pool_error: str) -> "IdentityAppError":
        return cls(
            f"Pool error: {pool_error}",
            "POOL_ERROR",
            {"tx_id": tx_id, "pool_error": pool_error},
        )

    @classmethod
    def transaction_wait_timeout_error(cls, tx_id: str, rounds: int) -> "IdentityAppError":
        return cls(
            f"Transaction {tx_id} not confirmed after {rounds} rounds",
            "TRANSACTION_WAIT_TIMEOUT",
            {"tx_id": tx_id, "rounds": rounds},
        )

    @classmethod
    def transient_query_error(cls, attempts: int, last_error: BaseException) -> "IdentityAppError":
        return cls(
            f"Node query failed after {attempts} attempts: {last_error}",
            "TRANSIENT_QUERY_FAILED",
            {"attempts": attempts, "last_error": str(last_error)},
        )

    @classmethod
    def invalid_response_error(cls, reason: str, payload: Any = None) -> "IdentityAppError":
        return cls(
            f"Invalid response: {reason}",
            "INVALID_RESPONSE",
            {"payload": payload},
        )

    @classmethod
    def missing_env_var_error(cls, name: str) -> "IdentityAppError":
        return cls(
            f"Environment variable {name} not set",
            "MISSING_ENV_VAR",
            {"name": name},
        )

    @classmethod
    def from_http_response(
        cls, url: str, status: int, body: Any, message: Optional[str]
    ) -> "IdentityAppError":
        if message:
            return cls(
                f"Node error {status} from {url}: {message}",
                "NODE_ERROR",
                {
                    "message": message,
                    "status": status,
                    "body": body,
                    "url": url,
                },
            )

        return cls(
            f"Unexpected HTTP Error {status} from {url}",
            "HTTP_ERROR",
            {"status": status, "body": body, "url": url},
        )


def get_contract_error_message(exc: BaseException) -> Optional[str]:
    """Return the node-reported message carried by ``exc``, if any."""

    if not isinstance(exc, IdentityAppError) or exc.code != "NODE_ERROR":
        return None
    details = exc.details or {}
    message = details.get("message")
    return message if isinstance(message, str) else None


def is_contract_exception(exc: BaseException) -> bool:
    return get_contract_error_message(exc) is not None


def is_contract_logic_exception(exc: BaseException) -> bool:
    message = get_contract_error_message(exc)
    return message is not None and "rejected by logic" in message


def is_contract_logic_eval_exception(exc: BaseException) -> bool:
    message = get_contract_error_message(exc)
    return message is not None and "logic eval error" in message
