"""Application filters – URL / request-parameter codec.

Wire keys follow the directory endpoint's snake_case names.  Only fields
that differ from their default are emitted; set-valued fields are joined
with ``,`` and booleans are either ``"true"`` or absent.
"""
from __future__ import annotations

from typing import Mapping
from urllib.parse import parse_qsl, urlencode

from expert_directory.application.filters.state import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZES,
    FilterState,
    SortBy,
)

QUERY = "query"
PAGE = "page"
PAGE_SIZE = "page_size"
SORT_BY = "sort_by"
DISCIPLINES = "filter_area_of_expertise"
STATES = "filter_state"
COUNTRIES = "filter_country"
AVAILABILITY = "availability"
VERIFIED = "verified"
REQUIRE_EMAIL = "mustHaveEmail"
REQUIRE_PHONE = "mustHavePhone"

_SET_FIELDS = (
    (DISCIPLINES, "disciplines"),
    (STATES, "states"),
    (COUNTRIES, "countries"),
)
_FLAG_FIELDS = (
    (AVAILABILITY, "availability_only"),
    (VERIFIED, "verified_only"),
    (REQUIRE_EMAIL, "require_email"),
    (REQUIRE_PHONE, "require_phone"),
)


def to_params(state: FilterState) -> dict[str, str]:
    """Return the non-default fields of *state* keyed by wire name."""
    params: dict[str, str] = {}
    if state.query:
        params[QUERY] = state.query
    if state.page != 1:
        params[PAGE] = str(state.page)
    if state.page_size != DEFAULT_PAGE_SIZE:
        params[PAGE_SIZE] = str(state.page_size)
    if state.sort_by is not SortBy.RELEVANCE:
        params[SORT_BY] = state.sort_by.value
    for wire, attr in _SET_FIELDS:
        values = getattr(state, attr)
        if values:
            params[wire] = ",".join(values)
    for wire, attr in _FLAG_FIELDS:
        if getattr(state, attr):
            params[wire] = "true"
    return params


def encode(state: FilterState) -> str:
    """Serialise *state* into a query string (``""`` for the default state)."""
    return urlencode(to_params(state))


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= 1 else default


def _split(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    # trimming and empty parts are left to FilterState
    return tuple(raw.split(","))


def from_params(params: Mapping[str, str]) -> FilterState:
    """Build a :class:`FilterState` from wire parameters.

    Absent keys take their default; values that cannot be parsed (a
    non-numeric page, an unknown sort key, a page size outside
    :data:`PAGE_SIZES`) fall back to the default as well.
    """
    page_size = _positive_int(params.get(PAGE_SIZE), DEFAULT_PAGE_SIZE)
    if page_size not in PAGE_SIZES:
        page_size = DEFAULT_PAGE_SIZE
    try:
        sort_by = SortBy(params.get(SORT_BY) or SortBy.RELEVANCE.value)
    except ValueError:
        sort_by = SortBy.RELEVANCE

    return FilterState(
        query=params.get(QUERY, ""),
        page=_positive_int(params.get(PAGE), 1),
        page_size=page_size,
        sort_by=sort_by,
        disciplines=_split(params.get(DISCIPLINES)),
        countries=_split(params.get(COUNTRIES)),
        states=_split(params.get(STATES)),
        **{attr: params.get(wire) == "true" for wire, attr in _FLAG_FIELDS},
    )


def decode(query_string: str) -> FilterState:
    """Parse a query string (with or without a leading ``?``) into a :class:`FilterState`."""
    # first occurrence wins for repeated keys
    params: dict[str, str] = {}
    for key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return from_params(params)


def build_location(path: str, state: FilterState) -> str:
    """Return ``path`` with the encoded state appended, or bare ``path`` when default."""
    query = encode(state)
    return f"{path}?{query}" if query else path


__all__ = ["build_location", "decode", "encode", "from_params", "to_params"]
