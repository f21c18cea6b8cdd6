"""HTTP adapter – ExpertDirectoryApi, the remote search endpoint."""
from __future__ import annotations

from typing import Any, Mapping

from expert_directory.adapters.http.client import HttpxHttpClient
from expert_directory.adapters.http.retry_client import RetryingHttpClient
from expert_directory.application.facets.buckets import parse_country_buckets, parse_discipline_buckets
from expert_directory.application.search.result import SearchResultPage
from expert_directory.config.directory import DirectorySettings
from expert_directory.kernel.errors import MalformedResponse
from expert_directory.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DIRECTORY_PATH = "/experts/expert_directory/"


def _non_negative_int(body: Mapping[str, Any], key: str) -> int:
    value = body.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedResponse(
            f"Directory response field '{key}' must be a non-negative integer",
            detail={"field": key, "value": repr(value)},
        )
    return value


def parse_search_response(body: Any) -> SearchResultPage:
    """Validate a decoded directory response and build a :class:`SearchResultPage`.

    ``count``, ``total_pages`` and ``results`` are mandatory; a body
    without them is a contract violation.  Aggregations are optional and
    parsed leniently.
    """
    if not isinstance(body, Mapping):
        raise MalformedResponse("Directory response is not a JSON object")
    total_count = _non_negative_int(body, "count")
    total_pages = _non_negative_int(body, "total_pages")
    results = body.get("results")
    if not isinstance(results, list) or not all(isinstance(r, Mapping) for r in results):
        raise MalformedResponse("Directory response field 'results' must be a list of objects")

    premium = body.get("premium_count")
    aggregations = body.get("aggregations") or {}
    return SearchResultPage(
        total_count=total_count,
        total_pages=total_pages,
        records=tuple(results),
        discipline_buckets=parse_discipline_buckets(aggregations),
        country_buckets=parse_country_buckets(aggregations),
        premium_count=premium if isinstance(premium, int) and not isinstance(premium, bool) else None,
    )


class ExpertDirectoryApi:
    """``GET {base_url}/experts/expert_directory/`` with the stripped filter params."""

    def __init__(self, client: HttpxHttpClient, path: str = DEFAULT_DIRECTORY_PATH) -> None:
        self._client = client
        self._path = path

    @classmethod
    def from_settings(cls, settings: DirectorySettings) -> "ExpertDirectoryApi":
        client = RetryingHttpClient(
            base_url=settings.api_base_url,
            timeout=settings.timeout_seconds,
            max_attempts=settings.retry_attempts,
            token=settings.api_token or None,
        )
        logger.info("directory_api_configured", **settings.redacted())
        return cls(client, settings.directory_path)

    async def __aenter__(self) -> "ExpertDirectoryApi":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def search(self, params: Mapping[str, str]) -> SearchResultPage:
        response = await self._client.get(self._path, params=dict(params))
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponse("Directory response is not valid JSON", cause=exc) from exc
        return parse_search_response(body)


__all__ = ["DEFAULT_DIRECTORY_PATH", "ExpertDirectoryApi", "parse_search_response"]
