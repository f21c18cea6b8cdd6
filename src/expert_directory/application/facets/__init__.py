"""Application facets – aggregation buckets, visible facet lists and selection."""
from expert_directory.application.facets.buckets import (
    FacetBucket,
    parse_country_buckets,
    parse_discipline_buckets,
)
from expert_directory.application.facets.aggregator import (
    FacetAggregator,
    FacetOption,
    FacetView,
    ShowMore,
    format_label,
    visible_countries,
    visible_disciplines,
)
from expert_directory.application.facets.selection import (
    FacetChip,
    FacetSelectionController,
    PanelVisibility,
    active_chips,
    toggle,
)

__all__ = [
    "FacetAggregator",
    "FacetBucket",
    "FacetChip",
    "FacetOption",
    "FacetSelectionController",
    "FacetView",
    "PanelVisibility",
    "ShowMore",
    "active_chips",
    "format_label",
    "parse_country_buckets",
    "parse_discipline_buckets",
    "toggle",
    "visible_countries",
    "visible_disciplines",
]
