"""Client for the algod v2 REST API."""
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from algosdk import encoding, transaction

from .errors import IdentityAppError
from .http import HttpClient

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AlgodNode:
    """Thin algod client exposing the calls used by deployment and tests."""

    base_url: str
    token: str
    http_client: HttpClient

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @property
    def _headers(self) -> Dict[str, str]:
        return {"X-Algo-API-Token": self.token}

    def _get(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        return self.http_client.send_get_request(
            self.base_url, endpoint, params, headers=self._headers
        )

    def _expect_mapping(self, payload: Any, endpoint: str) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise IdentityAppError.invalid_response_error(f"expected an object from {endpoint}", payload)
        return payload

    def health(self) -> Any:
        return self._get("/health")

    def status(self) -> Mapping[str, Any]:
        return self._expect_mapping(self._get("/v2/status"), "/v2/status")

    def status_after_block(self, round_num: int) -> Mapping[str, Any]:
        endpoint = f"/v2/status/wait-for-block-after/{int(round_num)}"
        return self._expect_mapping(self._get(endpoint), endpoint)

    def pending_transaction_info(self, tx_id: str) -> Mapping[str, Any]:
        endpoint = f"/v2/transactions/pending/{tx_id}"
        return self._expect_mapping(self._get(endpoint, {"format": "json"}), endpoint)

    def suggested_params(self) -> transaction.SuggestedParams:
        params = self._expect_mapping(self._get("/v2/transactions/params"), "/v2/transactions/params")
        return transaction.SuggestedParams(
            params["fee"],
            params["last-round"],
            params["last-round"] + 1000,
            params["genesis-hash"],
            params["genesis-id"],
            False,
            params.get("consensus-version"),
            params.get("min-fee"),
        )

    def send_transactions(self, signed_txns: Sequence[transaction.SignedTransaction]) -> str:
        """Submit ``signed_txns`` as one request and return the first transaction id."""

        if not signed_txns:
            raise ValueError("At least one signed transaction is required")

        raw = b"".join(base64.b64decode(encoding.msgpack_encode(stxn)) for stxn in signed_txns)
        response = self.http_client.send_post_request(
            self.base_url, "/v2/transactions", data=raw, headers=self._headers
        )
        response = self._expect_mapping(response, "/v2/transactions")
        tx_id = response.get("txId")
        if not isinstance(tx_id, str):
            raise IdentityAppError.invalid_response_error("missing transaction id", response)
        logger.debug("Submitted %d transaction(s), first id %s", len(signed_txns), tx_id)
        return tx_id

    def compile(self, source: bytes) -> Mapping[str, Any]:
        response = self.http_client.send_post_request(
            self.base_url, "/v2/teal/compile", data=source, headers=self._headers
        )
        return self._expect_mapping(response, "/v2/teal/compile")

    def account_info(self, address: str) -> Mapping[str, Any]:
        endpoint = f"/v2/accounts/{address}"
        return self._expect_mapping(self._get(endpoint), endpoint)

    def application_info(self, app_id: int) -> Mapping[str, Any]:
        endpoint = f"/v2/applications/{int(app_id)}"
        return self._expect_mapping(self._get(endpoint), endpoint)

    def block(self, round_num: int) -> Mapping[str, Any]:
        endpoint = f"/v2/blocks/{int(round_num)}"
        return self._expect_mapping(self._get(endpoint, {"format": "json"}), endpoint)
