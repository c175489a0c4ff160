"""Client for the key management daemon used by local sandboxes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .errors import IdentityAppError
from .http import HttpClient


@dataclass(slots=True)
class KmdNode:
    base_url: str
    token: str
    http_client: HttpClient

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @property
    def _headers(self) -> Dict[str, str]:
        return {"X-KMD-API-Token": self.token}

    def _post(self, endpoint: str, body: Mapping[str, Any]) -> Mapping[str, Any]:
        payload = self.http_client.send_post_request(
            self.base_url, endpoint, body, headers=self._headers
        )
        if not isinstance(payload, Mapping):
            raise IdentityAppError.invalid_response_error(f"expected an object from {endpoint}", payload)
        return payload

    def versions(self) -> List[str]:
        payload = self.http_client.send_get_request(self.base_url, "/versions", headers=self._headers)
        return list(payload.get("versions") or []) if isinstance(payload, Mapping) else []

    def list_wallets(self) -> List[Mapping[str, Any]]:
        payload = self.http_client.send_get_request(self.base_url, "/v1/wallets", headers=self._headers)
        if not isinstance(payload, Mapping):
            raise IdentityAppError.invalid_response_error("expected an object from /v1/wallets", payload)
        return list(payload.get("wallets") or [])

    def init_wallet_handle(self, wallet_id: str, password: str) -> str:
        payload = self._post(
            "/v1/wallet/init", {"wallet_id": wallet_id, "wallet_password": password}
        )
        return str(payload["wallet_handle_token"])

    def release_wallet_handle(self, handle: str) -> None:
        self._post("/v1/wallet/release", {"wallet_handle_token": handle})

    def list_keys(self, handle: str) -> List[str]:
        payload = self._post("/v1/key/list", {"wallet_handle_token": handle})
        return list(payload.get("addresses") or [])

    def export_key(self, handle: str, password: str, address: str) -> str:
        """Return the base64 private key for ``address``."""

        payload = self._post(
            "/v1/key/export",
            {"wallet_handle_token": handle, "wallet_password": password, "address": address},
        )
        return str(payload["private_key"])
