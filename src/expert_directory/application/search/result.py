"""Application search – SearchResultPage."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from expert_directory.application.facets.buckets import FacetBucket


@dataclasses.dataclass(frozen=True)
class SearchResultPage:
    """One response of the directory endpoint.

    Replaced wholesale by the next response; the display records derived from
    ``records`` are recomputed each time and never cached on their own.
    """

    total_count: int
    total_pages: int
    records: tuple[Mapping[str, Any], ...] = ()
    discipline_buckets: tuple[FacetBucket, ...] = ()
    country_buckets: tuple[FacetBucket, ...] = ()
    premium_count: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def has_premium_experts(self) -> bool:
        return bool(self.premium_count)


__all__ = ["SearchResultPage"]
