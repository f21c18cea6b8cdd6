"""Application filters – FilterState, reducer actions and the URL codec."""
from expert_directory.application.filters.state import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZES,
    FacetGroup,
    FilterFlag,
    FilterState,
    SortBy,
)
from expert_directory.application.filters.reducer import (
    ClearAll,
    FilterAction,
    SetFlag,
    SetPage,
    SetPageSize,
    SetQuery,
    SetSort,
    ToggleFacet,
    reduce,
)
from expert_directory.application.filters.codec import build_location, decode, encode, from_params, to_params

__all__ = [
    "ClearAll",
    "DEFAULT_PAGE_SIZE",
    "FacetGroup",
    "FilterAction",
    "FilterFlag",
    "FilterState",
    "PAGE_SIZES",
    "SetFlag",
    "SetPage",
    "SetPageSize",
    "SetQuery",
    "SetSort",
    "SortBy",
    "ToggleFacet",
    "build_location",
    "decode",
    "encode",
    "from_params",
    "reduce",
    "to_params",
]
