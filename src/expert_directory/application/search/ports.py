"""Application search – ports to the outside world."""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from expert_directory.application.search.result import SearchResultPage


@runtime_checkable
class SearchApi(Protocol):
    """Remote search endpoint.

    Receives the stripped wire parameters.  Implementations raise
    :class:`~expert_directory.kernel.errors.RequestError` subclasses and must
    let :class:`asyncio.CancelledError` propagate.
    """

    async def search(self, params: Mapping[str, str]) -> SearchResultPage: ...


@runtime_checkable
class Navigator(Protocol):
    """Address bar: replaces the current location without a history entry."""

    def replace(self, location: str) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Toast-style user notifications."""

    def error(self, message: str) -> None: ...


__all__ = ["Navigator", "Notifier", "SearchApi"]
