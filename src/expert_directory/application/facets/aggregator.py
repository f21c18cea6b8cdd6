"""Application facets – visible facet lists computed from aggregation buckets.

Three filters run in order over the backend's buckets: a case-insensitive
substring match on the label, removal of values that are already selected
(they are shown as chips instead), and no re-sorting, so the backend order
is preserved.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

from expert_directory.application.facets.buckets import FacetBucket
from expert_directory.application.filters.state import FilterState

LABEL_LIMIT = 25
SHOW_MORE_STEP = 10
COUNTRY_LIMIT = 10
STATE_LIMIT = 10


def format_label(key: str, count: int, limit: int = LABEL_LIMIT) -> str:
    """``"Cardiology (12)"``; keys over *limit* characters are cut and get ``...``."""
    if len(key) <= limit:
        return f"{key} ({count})"
    return f"{key[:limit]}... ({count})"


@dataclasses.dataclass(frozen=True)
class FacetOption:
    """A renderable facet entry."""

    key: str
    count: int
    children: tuple["FacetOption", ...] = ()

    @property
    def label(self) -> str:
        return format_label(self.key, self.count)

    @property
    def tooltip(self) -> str:
        return f"{self.key} ({self.count})"

    @property
    def truncated(self) -> bool:
        return len(self.key) > LABEL_LIMIT


def _matches(key: str, needle: str) -> bool:
    return needle in key.lower()


def _option(bucket: FacetBucket, children: Iterable[FacetOption] = ()) -> FacetOption:
    return FacetOption(key=bucket.key, count=bucket.count, children=tuple(children))


def visible_disciplines(
    buckets: Sequence[FacetBucket],
    search_text: str,
    selected: Iterable[str],
) -> list[FacetOption]:
    needle = search_text.strip().lower()
    chosen = set(selected)
    return [
        _option(b)
        for b in buckets
        if (not needle or _matches(b.key, needle)) and b.key not in chosen
    ]


def visible_countries(
    buckets: Sequence[FacetBucket],
    search_text: str,
    selected_countries: Iterable[str],
    selected_states: Iterable[str],
) -> list[FacetOption]:
    """Country list with nested, independently filtered state lists.

    A country survives the text filter when its own label or one of its
    states matches.  When only states matched, the nested list is narrowed
    to the matching states.  Selected states are removed from every parent
    whether or not that parent country is itself selected.
    """
    needle = search_text.strip().lower()
    countries = set(selected_countries)
    states = set(selected_states)
    out: list[FacetOption] = []
    for country in buckets:
        if country.key in countries:
            continue
        country_hit = not needle or _matches(country.key, needle)
        state_hits = [s for s in country.children if needle and _matches(s.key, needle)]
        if not country_hit and not state_hits:
            continue
        children = country.children if country_hit else state_hits
        out.append(_option(country, (_option(s) for s in children if s.key not in states)))
    return out


@dataclasses.dataclass
class ShowMore:
    """Counter behind the discipline list's "show more" link; view state only."""

    visible: int = SHOW_MORE_STEP
    step: int = SHOW_MORE_STEP

    def expand(self) -> int:
        self.visible += self.step
        return self.visible

    def reset(self) -> None:
        self.visible = self.step

    def slice(self, options: Sequence[FacetOption]) -> list[FacetOption]:
        return list(options[: self.visible])

    def has_more(self, options: Sequence[FacetOption]) -> bool:
        return len(options) > self.visible


@dataclasses.dataclass(frozen=True)
class FacetView:
    disciplines: list[FacetOption]
    countries: list[FacetOption]
    has_more_disciplines: bool = False
    disciplines_empty_message: str | None = None
    countries_empty_message: str | None = None


class FacetAggregator:
    """Holds the facet search boxes and "show more" state and renders facet lists."""

    def __init__(self) -> None:
        self.discipline_search = ""
        self.country_search = ""
        self.show_more = ShowMore()

    def reset(self) -> None:
        self.discipline_search = ""
        self.country_search = ""
        self.show_more.reset()

    def view(
        self,
        discipline_buckets: Sequence[FacetBucket],
        country_buckets: Sequence[FacetBucket],
        state: FilterState,
    ) -> FacetView:
        disciplines = visible_disciplines(discipline_buckets, self.discipline_search, state.disciplines)
        countries = visible_countries(country_buckets, self.country_search, state.countries, state.states)
        capped = [
            dataclasses.replace(c, children=c.children[:STATE_LIMIT]) for c in countries[:COUNTRY_LIMIT]
        ]
        return FacetView(
            disciplines=self.show_more.slice(disciplines),
            countries=capped,
            has_more_disciplines=self.show_more.has_more(disciplines),
            disciplines_empty_message=(
                f'No disciplines found matching "{self.discipline_search}"'
                if not disciplines and self.discipline_search
                else None
            ),
            countries_empty_message=(
                f'No countries/states found matching "{self.country_search}"'
                if not countries and self.country_search
                else None
            ),
        )


__all__ = [
    "COUNTRY_LIMIT",
    "FacetAggregator",
    "FacetOption",
    "FacetView",
    "LABEL_LIMIT",
    "SHOW_MORE_STEP",
    "STATE_LIMIT",
    "ShowMore",
    "format_label",
    "visible_countries",
    "visible_disciplines",
]
