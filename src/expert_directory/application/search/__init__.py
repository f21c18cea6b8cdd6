"""Application search – result page, presenter, dispatcher and session."""
from expert_directory.application.search.result import SearchResultPage
from expert_directory.application.search.ports import Navigator, Notifier, SearchApi
from expert_directory.application.search.presenter import (
    ExpertSummary,
    Location,
    display_name,
    present,
    present_all,
    primary_address,
    split_expertise,
)
from expert_directory.application.search.dispatcher import QueryDispatcher
from expert_directory.application.search.debounce import DebouncedInput
from expert_directory.application.search.session import DirectorySession

__all__ = [
    "DebouncedInput",
    "DirectorySession",
    "ExpertSummary",
    "Location",
    "Navigator",
    "Notifier",
    "QueryDispatcher",
    "SearchApi",
    "SearchResultPage",
    "display_name",
    "present",
    "present_all",
    "primary_address",
    "split_expertise",
]
