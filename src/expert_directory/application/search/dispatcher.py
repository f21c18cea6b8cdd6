"""Application search – QueryDispatcher.

Owns the single in-flight request of a search session.  Issuing a new search
cancels the previous asyncio task and bumps a sequence number; a result whose
sequence number is no longer current is reported as :class:`CancelledRequest`
even if it arrived, so a slow superseded response can never overwrite a
newer one.
"""
from __future__ import annotations

import asyncio
from typing import Any

from expert_directory.application.filters.codec import to_params
from expert_directory.application.filters.state import FilterState
from expert_directory.application.search.ports import SearchApi
from expert_directory.application.search.result import SearchResultPage
from expert_directory.kernel.errors import CancelledRequest, RequestError, ServerError
from expert_directory.observability.logging import get_logger


class QueryDispatcher:
    """Turns filter snapshots into remote searches, one active at a time."""

    def __init__(self, api: SearchApi, logger: Any = None) -> None:
        self._api = api
        self._log = logger or get_logger(__name__)
        self._sequence = 0
        self._inflight: asyncio.Task[SearchResultPage] | None = None

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def sequence(self) -> int:
        return self._sequence

    def _supersede(self) -> None:
        previous = self._inflight
        if previous is not None and not previous.done():
            previous.cancel()
            self._log.debug("search_superseded", sequence=self._sequence - 1)

    async def search(self, filters: FilterState) -> SearchResultPage:
        """Issue one request for *filters*.

        Raises :class:`CancelledRequest` when superseded, otherwise the
        :class:`NetworkError` / :class:`ServerError` raised by the API port.
        Unexpected exceptions are wrapped as :class:`ServerError`.
        """
        self._sequence += 1
        seq = self._sequence
        self._supersede()

        params = to_params(filters)
        task = asyncio.ensure_future(self._api.search(params))
        self._inflight = task
        self._log.debug("search_issued", sequence=seq, params=params)

        try:
            page = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            raise CancelledRequest(detail={"sequence": seq}) from None
        except RequestError:
            if seq != self._sequence:
                raise CancelledRequest(detail={"sequence": seq}) from None
            raise
        except Exception as exc:
            if seq != self._sequence:
                raise CancelledRequest(detail={"sequence": seq}) from None
            raise ServerError(f"Search failed: {exc}", cause=exc) from exc
        finally:
            if self._inflight is task:
                self._inflight = None

        if seq != self._sequence:
            self._log.debug("search_stale_response_dropped", sequence=seq, current=self._sequence)
            raise CancelledRequest(detail={"sequence": seq})
        return page

    async def aclose(self) -> None:
        """Cancel the outstanding request, if any, and wait for it to settle."""
        task = self._inflight
        self._sequence += 1
        self._inflight = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)


__all__ = ["QueryDispatcher"]
