"""Application filters – FilterState value object."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable

from expert_directory.kernel.errors import ValidationError

PAGE_SIZES: tuple[int, ...] = (12, 24, 50, 100)
DEFAULT_PAGE_SIZE = 12


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    RATING = "rating"
    EXPERIENCE = "experience"
    RESPONSE_TIME = "response_time"
    RATE_LOW = "rate_low"
    RATE_HIGH = "rate_high"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortBy.RELEVANCE: "Relevance",
    SortBy.RATING: "Highest Rated",
    SortBy.EXPERIENCE: "Most Experienced",
    SortBy.RESPONSE_TIME: "Fastest Response",
    SortBy.RATE_LOW: "Lowest Rate",
    SortBy.RATE_HIGH: "Highest Rate",
}


class FacetGroup(str, Enum):
    DISCIPLINE = "discipline"
    COUNTRY = "country"
    STATE = "state"

    @property
    def field_name(self) -> str:
        return {
            FacetGroup.DISCIPLINE: "disciplines",
            FacetGroup.COUNTRY: "countries",
            FacetGroup.STATE: "states",
        }[self]


class FilterFlag(str, Enum):
    AVAILABILITY = "availability_only"
    VERIFIED = "verified_only"
    REQUIRE_EMAIL = "require_email"
    REQUIRE_PHONE = "require_phone"


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        v = v.strip()
        if v and v not in seen:
            seen.add(v)
            out.append(v)
    return tuple(out)


@dataclasses.dataclass(frozen=True)
class FilterState:
    """Complete, serialisable snapshot of the active search criteria.

    Facet selections are ordered and duplicate-free; empty keys are dropped.
    Instances are never mutated: use :func:`~expert_directory.application.filters.reduce`
    (or :meth:`replace`) to derive the next snapshot.
    """

    query: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: SortBy = SortBy.RELEVANCE
    disciplines: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()
    states: tuple[str, ...] = ()
    availability_only: bool = False
    verified_only: bool = False
    require_email: bool = False
    require_phone: bool = False

    def __post_init__(self) -> None:
        problems = ValidationError("Invalid filter state")
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            problems.add("page", "page must be an integer >= 1")
        if self.page_size not in PAGE_SIZES:
            problems.add("page_size", f"page_size must be one of {PAGE_SIZES}")
        try:
            object.__setattr__(self, "sort_by", SortBy(self.sort_by))
        except ValueError:
            problems.add("sort_by", f"unknown sort key {self.sort_by!r}")
        problems.raise_if_any()

        for name in ("disciplines", "countries", "states"):
            object.__setattr__(self, name, _unique(getattr(self, name)))

    def replace(self, **changes: Any) -> "FilterState":
        return dataclasses.replace(self, **changes)

    def selected(self, group: FacetGroup) -> tuple[str, ...]:
        return getattr(self, FacetGroup(group).field_name)

    @property
    def has_active_filters(self) -> bool:
        """True when any criterion besides paging and sorting is set."""
        return bool(
            self.query
            or self.disciplines
            or self.countries
            or self.states
            or self.availability_only
            or self.verified_only
            or self.require_email
            or self.require_phone
        )


__all__ = ["DEFAULT_PAGE_SIZE", "FacetGroup", "FilterFlag", "FilterState", "PAGE_SIZES", "SortBy"]
