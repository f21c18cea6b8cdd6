"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from expert_directory.kernel.errors import NetworkError, ServerError


def _server_detail(response: httpx.Response) -> str | None:
    """Pull the ``detail`` message out of an error body, when there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    return None


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Timeouts and transport failures become :class:`NetworkError`; non-2xx
    answers become :class:`ServerError` carrying the status code and the
    server's ``detail`` text.  :class:`asyncio.CancelledError` is never
    caught here.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        token: str | None = None,
        **kwargs: Any,
    ) -> None:
        headers = {"Content-Type": "application/json", **kwargs.pop("headers", {})}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise NetworkError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ServerError(
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                server_detail=_server_detail(exc.response),
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"HTTP request failed: {method} {url}: {exc}", cause=exc) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
