"""Unit tests for FilterState and the filter reducer."""

from __future__ import annotations

import pytest

from expert_directory.application.filters import (
    ClearAll,
    FacetGroup,
    FilterFlag,
    FilterState,
    SetFlag,
    SetPage,
    SetPageSize,
    SetQuery,
    SetSort,
    SortBy,
    ToggleFacet,
    reduce,
)
from expert_directory.kernel.errors import ValidationError


# ---------------------------------------------------------------------------
# FilterState
# ---------------------------------------------------------------------------


class TestFilterState:
    def test_defaults(self) -> None:
        s = FilterState()
        assert s.query == ""
        assert s.page == 1
        assert s.page_size == 12
        assert s.sort_by is SortBy.RELEVANCE
        assert s.disciplines == ()
        assert not s.has_active_filters

    def test_is_frozen(self) -> None:
        s = FilterState()
        with pytest.raises((AttributeError, TypeError)):
            s.page = 2  # type: ignore[misc]

    def test_page_zero_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FilterState(page=0)
        assert exc_info.value.errors[0]["field"] == "page"

    def test_every_failing_field_reported(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FilterState(page=0, page_size=13, sort_by="cheapest")  # type: ignore[arg-type]
        assert exc_info.value.fields == ["page", "page_size", "sort_by"]

    def test_page_size_outside_allowed_raises(self) -> None:
        with pytest.raises(ValidationError):
            FilterState(page_size=13)

    def test_sort_string_is_coerced(self) -> None:
        assert FilterState(sort_by="rating").sort_by is SortBy.RATING  # type: ignore[arg-type]

    def test_unknown_sort_raises(self) -> None:
        with pytest.raises(ValidationError):
            FilterState(sort_by="cheapest")  # type: ignore[arg-type]

    def test_facets_deduplicated_in_order(self) -> None:
        s = FilterState(disciplines=("B", "A", "B", "", "C"))
        assert s.disciplines == ("B", "A", "C")

    def test_facet_keys_trimmed(self) -> None:
        s = FilterState(disciplines=(" Cardiology", "Cardiology ", "  "), countries=(" Canada",))
        assert s.disciplines == ("Cardiology",)
        assert s.countries == ("Canada",)

    def test_has_active_filters(self) -> None:
        assert FilterState(query="x").has_active_filters
        assert FilterState(require_phone=True).has_active_filters
        assert FilterState(states=("Texas",)).has_active_filters
        assert not FilterState(page=3, sort_by=SortBy.RATING).has_active_filters

    def test_sort_labels(self) -> None:
        assert SortBy.RATE_LOW.label == "Lowest Rate"


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------


class TestReduce:
    def test_set_query_resets_page(self) -> None:
        s = reduce(FilterState(page=4), SetQuery("  cardiology "))
        assert s.query == "cardiology"
        assert s.page == 1

    def test_toggle_appends_in_order(self) -> None:
        s = reduce(FilterState(), ToggleFacet(FacetGroup.DISCIPLINE, "Cardiology", True))
        s = reduce(s, ToggleFacet(FacetGroup.DISCIPLINE, "Oncology", True))
        assert s.disciplines == ("Cardiology", "Oncology")

    def test_toggle_on_twice_has_no_duplicate(self) -> None:
        s = reduce(FilterState(), ToggleFacet(FacetGroup.COUNTRY, "USA", True))
        s = reduce(s, ToggleFacet(FacetGroup.COUNTRY, "USA", True))
        assert s.countries == ("USA",)

    def test_toggle_off_removes(self) -> None:
        s = FilterState(states=("Texas", "Ohio"))
        s = reduce(s, ToggleFacet(FacetGroup.STATE, "Texas", False))
        assert s.states == ("Ohio",)

    def test_toggle_key_trimmed(self) -> None:
        s = reduce(FilterState(), ToggleFacet(FacetGroup.DISCIPLINE, " Cardiology", True))
        assert s.disciplines == ("Cardiology",)
        s = reduce(s, ToggleFacet(FacetGroup.DISCIPLINE, " Cardiology", False))
        assert s.disciplines == ()

    def test_country_and_state_independent(self) -> None:
        s = reduce(FilterState(), ToggleFacet(FacetGroup.COUNTRY, "USA", True))
        assert s.states == ()
        s = reduce(s, ToggleFacet(FacetGroup.STATE, "Texas", True))
        s = reduce(s, ToggleFacet(FacetGroup.COUNTRY, "USA", False))
        assert s.states == ("Texas",)
        assert s.countries == ()

    def test_toggle_resets_page(self) -> None:
        s = reduce(FilterState(page=5), ToggleFacet(FacetGroup.DISCIPLINE, "X", True))
        assert s.page == 1

    def test_set_flag(self) -> None:
        s = reduce(FilterState(), SetFlag(FilterFlag.VERIFIED, True))
        assert s.verified_only is True
        s = reduce(s, SetFlag(FilterFlag.VERIFIED, False))
        assert s.verified_only is False

    def test_set_sort(self) -> None:
        s = reduce(FilterState(page=2), SetSort(SortBy.EXPERIENCE))
        assert s.sort_by is SortBy.EXPERIENCE
        assert s.page == 1

    def test_set_page_clamps_to_one(self) -> None:
        assert reduce(FilterState(page=3), SetPage(0)).page == 1
        assert reduce(FilterState(), SetPage(7)).page == 7

    def test_set_page_keeps_criteria(self) -> None:
        s = FilterState(query="q", disciplines=("A",))
        assert reduce(s, SetPage(2)) == s.replace(page=2)

    def test_set_page_size_resets_page(self) -> None:
        s = reduce(FilterState(page=9), SetPageSize(50))
        assert s.page_size == 50
        assert s.page == 1

    def test_set_page_size_invalid_raises(self) -> None:
        with pytest.raises(ValidationError):
            reduce(FilterState(), SetPageSize(10))

    def test_clear_all_is_fresh_state(self) -> None:
        s = FilterState(
            query="x", page=3, page_size=50, sort_by=SortBy.RATING,
            disciplines=("A",), countries=("USA",), states=("Ohio",),
            availability_only=True, verified_only=True, require_email=True, require_phone=True,
        )
        assert reduce(s, ClearAll()) == FilterState()

    def test_clear_all_idempotent(self) -> None:
        s = FilterState(query="x", disciplines=("A",))
        once = reduce(s, ClearAll())
        twice = reduce(once, ClearAll())
        assert once == twice == FilterState()

    def test_unknown_action_raises(self) -> None:
        with pytest.raises(TypeError):
            reduce(FilterState(), object())  # type: ignore[arg-type]
