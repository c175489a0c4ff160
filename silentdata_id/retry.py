"""Bounded retry policy for node queries."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Tuple, Type, TypeVar

import requests

from .errors import IdentityAppError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def linear_backoff(attempt: int) -> float:
    """Seconds to sleep after the ``attempt``-th failure (1-based)."""

    return 1.0 * attempt


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 5
    backoff: Callable[[int], float] = linear_backoff
    sleep: Callable[[float], None] = time.sleep
    retry_on: Tuple[Type[BaseException], ...] = field(
        default=(IdentityAppError, requests.RequestException)
    )

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def call(self, fn: Callable[[], _T]) -> _T:
        """Run ``fn`` until it succeeds or ``max_attempts`` are used up."""

        attempt = 0
        while True:
            attempt += 1
            try:
                return fn()
            except self.retry_on as exc:
                logger.warning(
                    "Node query failed (attempt %d/%d): %s", attempt, self.max_attempts, exc
                )
                if attempt >= self.max_attempts:
                    raise IdentityAppError.transient_query_error(attempt, exc) from exc
                self.sleep(self.backoff(attempt))
