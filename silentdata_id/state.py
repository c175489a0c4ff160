"""Decoding of application global and local state."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, Mapping, Protocol, Union

from .errors import IdentityAppError

StateScalar = Union[int, bytes]


class StateValueType(IntEnum):
    """Type tags used by algod for teal values."""

    BYTES = 1
    UINT = 2


@dataclass(frozen=True, slots=True)
class StateValue:
    type: StateValueType
    value: StateScalar

    @classmethod
    def decode(cls, raw: Mapping[str, Any]) -> "StateValue":
        """Decode an algod ``TealValue`` object (``{"type", "bytes", "uint"}``)."""

        try:
            value_type = StateValueType(raw.get("type"))
        except ValueError as exc:
            raise IdentityAppError(
                f"Unexpected state type: {raw.get('type')}",
                "UNEXPECTED_STATE_TYPE",
                {"value": dict(raw)},
            ) from exc

        if value_type is StateValueType.UINT:
            return cls(value_type, int(raw.get("uint", 0)))
        return cls(value_type, base64.b64decode(raw.get("bytes", "")))

    def encode(self) -> Dict[str, Any]:
        if self.type is StateValueType.UINT:
            return {"type": int(self.type), "bytes": "", "uint": int(self.value)}
        return {"type": int(self.type), "bytes": base64.b64encode(bytes(self.value)).decode(), "uint": 0}

    def as_text(self) -> Union[int, str]:
        if self.type is StateValueType.UINT:
            return int(self.value)
        return bytes(self.value).decode("utf-8", errors="replace")


class StateNode(Protocol):
    def application_info(self, app_id: int) -> Mapping[str, Any]:
        ...

    def account_info(self, address: str) -> Mapping[str, Any]:
        ...


def _decode_key(raw_key: str) -> str:
    return base64.b64decode(raw_key).decode("utf-8", errors="replace")


def decode_state(entries: Iterable[Mapping[str, Any]]) -> Dict[str, StateScalar]:
    """Decode a key/value state array into ``{key: int | bytes}``."""

    state: Dict[str, StateScalar] = {}
    for entry in entries:
        state[_decode_key(entry["key"])] = StateValue.decode(entry["value"]).value
    return state


def get_app_global_state(node: StateNode, app_id: int) -> Dict[str, StateScalar]:
    app_info = node.application_info(app_id)
    return decode_state(app_info["params"].get("global-state") or [])


def get_local_state_value(
    node: StateNode, address: str, app_id: int, key: str, decode: bool = True
) -> Union[int, str, bytes]:
    """Return one local state value of ``address`` for ``app_id``.

    With ``decode`` the key is matched against the decoded key name and byte
    values are returned as text; otherwise ``key`` is the base64 key and
    byte values are returned raw.
    """

    account_info = node.account_info(address)
    local_states = account_info.get("apps-local-state")
    if not local_states:
        raise IdentityAppError("No local state", "NO_LOCAL_STATE", {"address": address})

    app_local_state = next((item for item in local_states if item.get("id") == app_id), None)
    if app_local_state is None:
        raise IdentityAppError(
            "No local state", "NO_LOCAL_STATE", {"address": address, "app_id": app_id}
        )

    for entry in app_local_state.get("key-value") or []:
        local_key = _decode_key(entry["key"]) if decode else entry["key"]
        if local_key == key:
            value = StateValue.decode(entry["value"])
            return value.as_text() if decode else value.value

    raise IdentityAppError("Key not found", "KEY_NOT_FOUND", {"app_id": app_id, "key": key})
