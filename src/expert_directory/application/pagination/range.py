"""Application pagination – result range for the "Showing X to Y of Z" header."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ResultRange:
    first: int
    last: int
    total: int

    @property
    def is_empty(self) -> bool:
        return self.total <= 0 or self.first > self.last

    def describe(self, noun: str = "experts") -> str:
        if self.is_empty:
            return ""
        return f"Showing {self.first} to {self.last} of {self.total} {noun}"


def result_range(page: int, page_size: int, total_count: int) -> ResultRange:
    first = (page - 1) * page_size + 1
    last = min(page * page_size, total_count)
    return ResultRange(first=first, last=last, total=total_count)


__all__ = ["ResultRange", "result_range"]
