"""Application pagination – page-number window and previous/next navigation."""
from __future__ import annotations

import dataclasses
from typing import Literal

NEIGHBOURHOOD = 3


@dataclasses.dataclass(frozen=True, slots=True)
class PageLink:
    """One slot of the page-number strip."""

    kind: Literal["page", "ellipsis"]
    value: int | None = None
    active: bool = False

    @classmethod
    def page(cls, value: int, current: int) -> "PageLink":
        return cls("page", value, value == current)

    @classmethod
    def ellipsis(cls) -> "PageLink":
        return cls("ellipsis")


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, page), max(1, total_pages))


def _neighbourhood(current: int, total_pages: int) -> range:
    start = max(1, min(current - 1, total_pages - NEIGHBOURHOOD + 1))
    end = min(total_pages, start + NEIGHBOURHOOD - 1)
    return range(start, end + 1)


def compute_window(current_page: int, total_pages: int) -> list[PageLink]:
    """Return the page strip for *current_page* out of *total_pages*.

    Page 1 is always shown and the last page whenever there is more than one.
    Around the current page sits a three-page neighbourhood kept inside
    ``[1, total_pages]``; an ellipsis stands in for every hidden run::

        compute_window(1, 10)  -> 1 2 3 … 10
        compute_window(5, 10)  -> 1 … 4 5 6 … 10
        compute_window(9, 10)  -> 1 … 8 9 10
    """
    current = clamp_page(current_page, total_pages)
    if total_pages <= 1:
        return [PageLink.page(1, current)]

    middle = [p for p in _neighbourhood(current, total_pages) if 1 < p < total_pages]
    links = [PageLink.page(1, current)]
    if middle and middle[0] > 2:
        links.append(PageLink.ellipsis())
    links.extend(PageLink.page(p, current) for p in middle)
    last_shown = middle[-1] if middle else 1
    if last_shown < total_pages - 1:
        links.append(PageLink.ellipsis())
    links.append(PageLink.page(total_pages, current))
    return links


def can_go_previous(current_page: int) -> bool:
    return current_page > 1


def can_go_next(current_page: int, total_pages: int) -> bool:
    return current_page < total_pages


def previous_page(current_page: int) -> int:
    return max(1, current_page - 1)


def next_page(current_page: int, total_pages: int) -> int:
    return max(1, min(total_pages, current_page + 1))


__all__ = [
    "PageLink",
    "can_go_next",
    "can_go_previous",
    "clamp_page",
    "compute_window",
    "next_page",
    "previous_page",
]
