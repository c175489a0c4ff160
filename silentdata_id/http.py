"""HTTP client helpers used to talk to algod and kmd."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .errors import IdentityAppError

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]


@dataclass
class HttpClient:
    """Small convenience wrapper around :mod:`requests` with node defaults."""

    requestor: Optional[HttpRequestor] = None
    user_agent: str = "python-silentdata-id/0.1"
    default_headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float = 30

    def __post_init__(self) -> None:
        if self.requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self.requestor = _requestor

    def _send_request(
        self,
        method: str,
        base_url: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        body: Optional[Mapping[str, Any]] = None,
        data: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        url = f"{base_url.rstrip('/')}{endpoint}"
        request_headers: MutableMapping[str, str] = {
            "User-Agent": self.user_agent,
            **self.default_headers,
        }
        if data is not None:
            request_headers["Content-Type"] = "application/x-binary"
        else:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)

        kwargs: MutableMapping[str, Any] = {
            "method": method,
            "headers": request_headers,
            "timeout": self.timeout,
        }
        if params:
            kwargs["params"] = params
        if data is not None:
            kwargs["data"] = data
        elif body is not None:
            kwargs["json"] = body

        assert self.requestor is not None
        response = self.requestor(url, kwargs)

        if not response.ok:
            message: Optional[str] = None
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            else:
                if isinstance(payload, Mapping):
                    raw_message = payload.get("message")
                    if isinstance(raw_message, str):
                        message = raw_message
            raise IdentityAppError.from_http_response(
                url, response.status_code, payload, message
            )

        try:
            return response.json()
        except ValueError:
            return response.text

    def send_post_request(
        self,
        base_url: str,
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        *,
        data: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self._send_request(
            "POST", base_url, endpoint, body=body, data=data, headers=headers
        )

    def send_get_request(
        self,
        base_url: str,
        endpoint: str,
        params: Optional[Mapping[str, str]] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self._send_request("GET", base_url, endpoint, params=params, headers=headers)
