"""HTTP adapter – RetryingHttpClient.

Retries live in the transport: a caller of :class:`HttpxHttpClient` sees
either the final response or the final error, never the attempts.
Only :class:`NetworkError` is retried; server answers are final.
"""
from __future__ import annotations

from typing import Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from expert_directory.adapters.http.client import HttpxHttpClient
from expert_directory.kernel.errors import NetworkError
from expert_directory.observability.logging import get_logger

logger = get_logger(__name__)


class RetryingHttpClient(HttpxHttpClient):
    """HTTP client with automatic retry on transient network failures."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        max_attempts: int = 3,
        wait: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self._max_attempts = max_attempts
        self._wait = wait or wait_exponential(multiplier=1, min=1, max=8)

    def _log_retry(self, retry_state: Any) -> None:
        logger.debug(
            "http_retry",
            attempt=retry_state.attempt_number,
            error=repr(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(NetworkError),
            before_sleep=self._log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await super()._request(method, url, **kwargs)
        return response


__all__ = ["RetryingHttpClient"]
