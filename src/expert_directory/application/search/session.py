"""Application search – DirectorySession.

The orchestrator behind the directory screen: it owns the current
:class:`FilterState`, mirrors it into the address bar on every change and
runs the fetch pipeline through a :class:`QueryDispatcher`.  Rendering code
reads ``experts``, ``facets()``, ``page_links()`` and friends; user input
comes in through the async methods below.
"""
from __future__ import annotations

from typing import Any

from expert_directory.application.facets.aggregator import FacetAggregator, FacetView
from expert_directory.application.facets.selection import (
    FacetChip,
    FacetSelectionController,
    PanelVisibility,
    active_chips,
)
from expert_directory.application.filters.codec import build_location, decode
from expert_directory.application.filters.reducer import (
    FilterAction,
    SetPage,
    SetPageSize,
    SetQuery,
    SetSort,
    reduce,
)
from expert_directory.application.filters.state import FilterState, SortBy
from expert_directory.application.pagination.range import result_range
from expert_directory.application.pagination.window import (
    PageLink,
    can_go_next,
    can_go_previous,
    clamp_page,
    compute_window,
    next_page,
    previous_page,
)
from expert_directory.application.search.debounce import DebouncedInput
from expert_directory.application.search.dispatcher import QueryDispatcher
from expert_directory.application.search.ports import Navigator, Notifier, SearchApi
from expert_directory.application.search.presenter import ExpertSummary, present_all
from expert_directory.application.search.result import SearchResultPage
from expert_directory.config.directory import DirectorySettings
from expert_directory.kernel.errors import CancelledRequest, MalformedResponse, RequestError
from expert_directory.observability.logging import get_logger

DIRECTORY_PATH = "/directory"


class DirectorySession:
    """One mounted directory screen."""

    def __init__(
        self,
        api: SearchApi,
        navigator: Navigator,
        notifier: Notifier,
        *,
        initial: FilterState | None = None,
        settings: DirectorySettings | None = None,
        path: str = DIRECTORY_PATH,
    ) -> None:
        self._settings = settings or DirectorySettings()
        self._navigator = navigator
        self._notifier = notifier
        self._path = path
        self._log = get_logger(__name__)
        self._state = initial or FilterState()
        self._dispatcher = QueryDispatcher(api, logger=self._log)

        self.result: SearchResultPage | None = None
        self.experts: list[ExpertSummary] = []
        self.loading = True
        self.error: str | None = None

        self.aggregator = FacetAggregator()
        self.selection = FacetSelectionController(self.dispatch, PanelVisibility())
        self._query_input: DebouncedInput[str] = DebouncedInput(
            self._settings.query_debounce_seconds, self._commit_query
        )
        self._discipline_search: DebouncedInput[str] = DebouncedInput(
            self._settings.facet_search_debounce_seconds, self._commit_discipline_search
        )
        self._country_search: DebouncedInput[str] = DebouncedInput(
            self._settings.facet_search_debounce_seconds, self._commit_country_search
        )

    @classmethod
    def from_url(
        cls,
        query_string: str,
        api: SearchApi,
        navigator: Navigator,
        notifier: Notifier,
        **kwargs: Any,
    ) -> "DirectorySession":
        return cls(api, navigator, notifier, initial=decode(query_string), **kwargs)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def location(self) -> str:
        return build_location(self._path, self._state)

    @property
    def total_count(self) -> int:
        return self.result.total_count if self.result else 0

    @property
    def total_pages(self) -> int:
        return self.result.total_pages if self.result else 0

    @property
    def query_text(self) -> str:
        """Text currently shown in the search box (possibly not yet committed)."""
        pending = self._query_input.value
        return pending if pending is not None else self._state.query

    async def start(self) -> None:
        """Mirror the initial state into the URL and run the first search."""
        self._navigator.replace(self.location)
        await self._refresh()

    async def dispatch(self, action: FilterAction) -> FilterState:
        """Apply *action*; when the state changes, sync the URL and refetch."""
        new_state = reduce(self._state, action)
        if new_state == self._state:
            return self._state
        self._state = new_state
        self._navigator.replace(self.location)
        await self._refresh()
        return new_state

    async def _refresh(self) -> None:
        state = self._state
        if not self._dispatcher.in_flight:
            self.loading = True
        try:
            page = await self._dispatcher.search(state)
            experts = self._present(page)
        except CancelledRequest:
            return
        except RequestError as exc:
            self._log.warning("search_failed", error=exc.to_dict())
            self.error = exc.user_message
            self.loading = False
            self._notifier.error(exc.user_message)
            return
        self.result = page
        self.experts = experts
        self.error = None
        self.loading = False
        self._log.info(
            "search_completed",
            total_count=page.total_count,
            total_pages=page.total_pages,
            sequence=self._dispatcher.sequence,
        )

    def _present(self, page: SearchResultPage) -> list[ExpertSummary]:
        try:
            return present_all(page.records)
        except (AttributeError, TypeError, ValueError) as exc:
            raise MalformedResponse(
                "Directory record could not be presented",
                detail={"sequence": self._dispatcher.sequence},
                cause=exc,
            ) from exc

    # ------------------------------------------------------------------
    # Text inputs
    # ------------------------------------------------------------------

    def type_query(self, text: str) -> None:
        self._query_input.push(text)

    def type_discipline_search(self, text: str) -> None:
        self._discipline_search.push(text)

    def type_country_search(self, text: str) -> None:
        self._country_search.push(text)

    async def _commit_query(self, text: str) -> None:
        await self.dispatch(SetQuery(text))

    async def _commit_discipline_search(self, text: str) -> None:
        self.aggregator.discipline_search = text

    async def _commit_country_search(self, text: str) -> None:
        self.aggregator.country_search = text

    async def settle(self) -> None:
        """Wait for pending debounced commits."""
        for field in (self._query_input, self._discipline_search, self._country_search):
            await field.wait()

    # ------------------------------------------------------------------
    # Sorting and pagination
    # ------------------------------------------------------------------

    async def set_sort(self, sort_by: SortBy | str) -> FilterState:
        return await self.dispatch(SetSort(SortBy(sort_by)))

    async def go_to_page(self, page: int) -> FilterState:
        return await self.dispatch(SetPage(page))

    async def next_page(self) -> FilterState:
        current = clamp_page(self._state.page, self.total_pages)
        if not can_go_next(current, self.total_pages):
            return self._state
        return await self.go_to_page(next_page(current, self.total_pages))

    async def previous_page(self) -> FilterState:
        # a page past the end (stale URL) steps back from the last page
        current = clamp_page(self._state.page, self.total_pages)
        if not can_go_previous(current):
            return self._state
        return await self.go_to_page(previous_page(current))

    async def set_page_size(self, page_size: int) -> FilterState:
        return await self.dispatch(SetPageSize(page_size))

    def page_links(self) -> list[PageLink]:
        return compute_window(self._state.page, self.total_pages)

    def summary(self) -> str:
        if not self.experts:
            return ""
        return result_range(self._state.page, self._state.page_size, self.total_count).describe()

    # ------------------------------------------------------------------
    # Facets
    # ------------------------------------------------------------------

    def facets(self) -> FacetView:
        if self.result is None:
            return self.aggregator.view((), (), self._state)
        return self.aggregator.view(self.result.discipline_buckets, self.result.country_buckets, self._state)

    def chips(self) -> list[FacetChip]:
        return active_chips(self._state)

    @property
    def show_premium_badge(self) -> bool:
        return self.result is not None and self.result.has_premium_experts

    async def clear_all(self) -> FilterState:
        for field in (self._query_input, self._discipline_search, self._country_search):
            field.cancel()
        self.aggregator.reset()
        return await self.selection.clear_all()

    async def aclose(self) -> None:
        """Unmount: drop pending debounces and cancel the in-flight search."""
        for field in (self._query_input, self._discipline_search, self._country_search):
            field.cancel()
        await self._dispatcher.aclose()


__all__ = ["DIRECTORY_PATH", "DirectorySession"]
