"""Application facets – selection controller, active chips and panel visibility."""
from __future__ import annotations

import dataclasses
from typing import Awaitable, Callable

from expert_directory.application.filters.reducer import (
    ClearAll,
    FilterAction,
    SetFlag,
    ToggleFacet,
    reduce,
)
from expert_directory.application.filters.state import FacetGroup, FilterFlag, FilterState

_CHIP_PREFIX = {
    FacetGroup.DISCIPLINE: "Discipline",
    FacetGroup.STATE: "State",
    FacetGroup.COUNTRY: "Country",
}
# chip area order: disciplines, then states, then countries
_CHIP_ORDER = (FacetGroup.DISCIPLINE, FacetGroup.STATE, FacetGroup.COUNTRY)


@dataclasses.dataclass(frozen=True)
class FacetChip:
    """A removable token for one selected facet value."""

    group: FacetGroup
    key: str

    @property
    def tooltip(self) -> str:
        return f"{_CHIP_PREFIX[self.group]}: {self.key}"


def active_chips(state: FilterState) -> list[FacetChip]:
    return [FacetChip(group, key) for group in _CHIP_ORDER for key in state.selected(group)]


def toggle(state: FilterState, group: FacetGroup | str, key: str, selected: bool) -> FilterState:
    """Pure toggle: add *key* to (or drop it from) the group's ordered selection."""
    return reduce(state, ToggleFacet(FacetGroup(group), key, selected))


@dataclasses.dataclass
class PanelVisibility:
    """Expanded/collapsed state of the facet panels; independent of FilterState.

    Everything starts expanded.  Country sub-panels are tracked by the
    countries the user has collapsed.
    """

    disciplines_open: bool = True
    countries_open: bool = True
    collapsed_countries: set[str] = dataclasses.field(default_factory=set)

    def toggle_disciplines(self) -> bool:
        self.disciplines_open = not self.disciplines_open
        return self.disciplines_open

    def toggle_countries(self) -> bool:
        self.countries_open = not self.countries_open
        return self.countries_open

    def is_country_open(self, country: str) -> bool:
        return country not in self.collapsed_countries

    def toggle_country(self, country: str) -> bool:
        if country in self.collapsed_countries:
            self.collapsed_countries.discard(country)
        else:
            self.collapsed_countries.add(country)
        return self.is_country_open(country)

    def reset(self) -> None:
        self.disciplines_open = True
        self.countries_open = True
        self.collapsed_countries.clear()


Dispatch = Callable[[FilterAction], Awaitable[FilterState]]


class FacetSelectionController:
    """Applies facet and option changes through the session's dispatch.

    Filtering is live: each call goes straight through the
    state -> URL -> fetch pipeline owned by *dispatch*.
    """

    def __init__(self, dispatch: Dispatch, panels: PanelVisibility | None = None) -> None:
        self._dispatch = dispatch
        self.panels = panels or PanelVisibility()

    async def toggle(self, group: FacetGroup | str, key: str, selected: bool) -> FilterState:
        return await self._dispatch(ToggleFacet(FacetGroup(group), key, selected))

    async def remove_chip(self, chip: FacetChip) -> FilterState:
        return await self.toggle(chip.group, chip.key, False)

    async def set_flag(self, flag: FilterFlag | str, value: bool) -> FilterState:
        return await self._dispatch(SetFlag(FilterFlag(flag), value))

    async def clear_all(self) -> FilterState:
        self.panels.reset()
        return await self._dispatch(ClearAll())


__all__ = [
    "FacetChip",
    "FacetSelectionController",
    "PanelVisibility",
    "active_chips",
    "toggle",
]
