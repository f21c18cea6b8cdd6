"""Application pagination – page window, navigation and result range."""
from expert_directory.application.pagination.window import (
    PageLink,
    can_go_next,
    can_go_previous,
    clamp_page,
    compute_window,
    next_page,
    previous_page,
)
from expert_directory.application.pagination.range import ResultRange, result_range

__all__ = [
    "PageLink",
    "ResultRange",
    "can_go_next",
    "can_go_previous",
    "clamp_page",
    "compute_window",
    "next_page",
    "previous_page",
    "result_range",
]
