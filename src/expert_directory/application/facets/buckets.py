"""Application facets – FacetBucket and aggregation payload parsing.

Aggregations are parsed leniently: a malformed aggregation degrades to an
empty facet list (and a warning) so the rest of the page stays usable.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from expert_directory.observability.logging import get_logger

logger = get_logger(__name__)

DISCIPLINE_AGG = "area_of_expertise_agg"
COUNTRY_STATE_AGG = "country_state_agg"


@dataclasses.dataclass(frozen=True)
class FacetBucket:
    """One aggregation entry: a facet value with its query-relative count."""

    key: str
    count: int
    children: tuple["FacetBucket", ...] = ()


def _bucket(raw: Any, key_field: str) -> FacetBucket | None:
    if not isinstance(raw, Mapping):
        return None
    key = raw.get(key_field)
    count = raw.get("doc_count", 0)
    if not isinstance(key, str) or not key:
        return None
    if isinstance(count, bool) or not isinstance(count, int):
        return None
    return FacetBucket(key=key, count=count)


def _bucket_list(aggregations: Any, name: str) -> list[Any]:
    if not isinstance(aggregations, Mapping):
        return []
    agg = aggregations.get(name)
    if agg is None:
        return []
    buckets = agg.get("buckets") if isinstance(agg, Mapping) else None
    if not isinstance(buckets, list):
        logger.warning("facet_payload_malformed", aggregation=name)
        return []
    return buckets


def parse_discipline_buckets(aggregations: Any) -> tuple[FacetBucket, ...]:
    """Parse ``area_of_expertise_agg.buckets`` (``{key, doc_count}`` entries)."""
    out: list[FacetBucket] = []
    skipped = 0
    for raw in _bucket_list(aggregations, DISCIPLINE_AGG):
        bucket = _bucket(raw, "key")
        if bucket is None:
            skipped += 1
            continue
        out.append(bucket)
    if skipped:
        logger.warning("facet_buckets_skipped", aggregation=DISCIPLINE_AGG, skipped=skipped)
    return tuple(out)


def parse_country_buckets(aggregations: Any) -> tuple[FacetBucket, ...]:
    """Parse ``country_state_agg.buckets`` into countries with nested states."""
    out: list[FacetBucket] = []
    skipped = 0
    for raw in _bucket_list(aggregations, COUNTRY_STATE_AGG):
        country = _bucket(raw, "label")
        if country is None:
            skipped += 1
            continue
        raw_states = raw.get("states") or []
        if not isinstance(raw_states, list):
            raw_states = []
            skipped += 1
        states = []
        for raw_state in raw_states:
            state = _bucket(raw_state, "label")
            if state is None:
                skipped += 1
                continue
            states.append(state)
        out.append(dataclasses.replace(country, children=tuple(states)))
    if skipped:
        logger.warning("facet_buckets_skipped", aggregation=COUNTRY_STATE_AGG, skipped=skipped)
    return tuple(out)


__all__ = ["COUNTRY_STATE_AGG", "DISCIPLINE_AGG", "FacetBucket", "parse_country_buckets", "parse_discipline_buckets"]
