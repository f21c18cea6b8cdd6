"""Application filters – actions and the single reducer entry point.

Every mutation path (text input, facet toggles, boolean options, sorting,
pagination, clear-all) is expressed as an action and applied by
:func:`reduce`.  Any change to the search criteria sends the user back to
page 1; only :class:`SetPage` moves within the current result set.
"""
from __future__ import annotations

import dataclasses
from typing import Union

from expert_directory.application.filters.state import FacetGroup, FilterFlag, FilterState, SortBy


@dataclasses.dataclass(frozen=True)
class SetQuery:
    text: str


@dataclasses.dataclass(frozen=True)
class ToggleFacet:
    group: FacetGroup
    key: str
    selected: bool


@dataclasses.dataclass(frozen=True)
class SetFlag:
    flag: FilterFlag
    value: bool


@dataclasses.dataclass(frozen=True)
class SetSort:
    sort_by: SortBy


@dataclasses.dataclass(frozen=True)
class SetPage:
    page: int


@dataclasses.dataclass(frozen=True)
class SetPageSize:
    page_size: int


@dataclasses.dataclass(frozen=True)
class ClearAll:
    pass


FilterAction = Union[SetQuery, ToggleFacet, SetFlag, SetSort, SetPage, SetPageSize, ClearAll]


def _toggled(values: tuple[str, ...], key: str, selected: bool) -> tuple[str, ...]:
    key = key.strip()
    if selected:
        return values if key in values else values + (key,)
    return tuple(v for v in values if v != key)


def reduce(state: FilterState, action: FilterAction) -> FilterState:
    """Return the snapshot that follows *state* once *action* is applied."""
    match action:
        case SetQuery(text=text):
            return state.replace(query=text.strip(), page=1)
        case ToggleFacet(group=group, key=key, selected=selected):
            group = FacetGroup(group)
            values = _toggled(state.selected(group), key, selected)
            return state.replace(**{group.field_name: values}, page=1)
        case SetFlag(flag=flag, value=value):
            return state.replace(**{FilterFlag(flag).value: bool(value)}, page=1)
        case SetSort(sort_by=sort_by):
            return state.replace(sort_by=SortBy(sort_by), page=1)
        case SetPage(page=page):
            return state.replace(page=max(1, page))
        case SetPageSize(page_size=page_size):
            return state.replace(page_size=page_size, page=1)
        case ClearAll():
            return FilterState()
        case _:
            raise TypeError(f"Unsupported filter action: {action!r}")


__all__ = [
    "ClearAll",
    "FilterAction",
    "SetFlag",
    "SetPage",
    "SetPageSize",
    "SetQuery",
    "SetSort",
    "ToggleFacet",
    "reduce",
]
