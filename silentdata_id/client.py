"""Public entry point for the identity application client."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .algod import AlgodNode
from .config import IdentityAppConfig, NodeSettings
from .contracts import DEFAULT_CONTRACTS_DIR
from .deploy import Deployer
from .http import HttpClient, HttpRequestor
from .kmd import KmdNode
from .retry import RetryPolicy
from .tx_waiter import DEFAULT_TIMEOUT_ROUNDS
from .verify import Verifier


@dataclass(slots=True)
class SilentDataIdOptions:
    node_settings: NodeSettings = field(default_factory=NodeSettings)
    config: IdentityAppConfig = field(default_factory=IdentityAppConfig)
    contracts_dir: Path = DEFAULT_CONTRACTS_DIR
    wait_timeout: int = DEFAULT_TIMEOUT_ROUNDS
    retry_policy: Optional[RetryPolicy] = None
    http_requestor: Optional[HttpRequestor] = None


class SilentDataId:
    """Main entry point for deploying and calling the identity application."""

    def __init__(self, options: Optional[SilentDataIdOptions] = None) -> None:
        self.options = options or SilentDataIdOptions()
        settings = self.options.node_settings

        self._http_client = HttpClient(self.options.http_requestor)

        self.algod = AlgodNode(settings.algod.base_url, settings.algod.token, self._http_client)
        self.kmd = KmdNode(settings.kmd.base_url, settings.kmd.token, self._http_client)

        self.deployer = Deployer(
            self.algod,
            self.options.config,
            Path(self.options.contracts_dir),
            self.options.wait_timeout,
            self.options.retry_policy,
        )

        self.verifier = Verifier(
            self.algod,
            self.options.config,
            self.options.wait_timeout,
            self.options.retry_policy,
        )

    @classmethod
    def from_env(cls, **overrides) -> "SilentDataId":
        return cls(SilentDataIdOptions(node_settings=NodeSettings.from_env(), **overrides))

    @property
    def config(self) -> IdentityAppConfig:
        return self.options.config
