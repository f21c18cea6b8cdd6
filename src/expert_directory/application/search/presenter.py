"""Application search – maps raw directory records into the display shape."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping, Sequence

NAME_PARTS = ("salutation", "first_name", "middle_name", "last_name", "professional_suffix")
DEFAULT_RATING = 4
DEFAULT_LANGUAGES: tuple[str, ...] = ("English",)


@dataclasses.dataclass(frozen=True)
class Location:
    city: str = ""
    state: str = ""

    def __str__(self) -> str:
        return ", ".join(part for part in (self.city, self.state) if part)


@dataclasses.dataclass(frozen=True)
class ExpertSummary:
    """Card-ready view of one directory record."""

    id: Any
    uuid: str | None
    name: str
    title: str
    specialties: tuple[str, ...]
    location: Location
    image_url: str | None = None
    is_verified: bool = False
    bio: str = ""
    rating: float = DEFAULT_RATING
    review_count: int | None = None
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    profile_type: str | None = None

    @property
    def status(self) -> str:
        return "claimed" if self.is_verified else "unclaimed"


def display_name(record: Mapping[str, Any]) -> str:
    parts = (str(record.get(key) or "").strip() for key in NAME_PARTS)
    return " ".join(p for p in parts if p)


def _label(value: Any) -> str:
    if isinstance(value, Mapping):
        return str(value.get("label") or "")
    return ""


def _entries(value: Any) -> list[Mapping[str, Any]]:
    # anything but a list of objects is treated as absent
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def primary_address(addresses: Sequence[Mapping[str, Any]] | None) -> Location:
    """Primary-flagged address, else the first one; ``Location("", "")`` when none."""
    entries = _entries(addresses)
    if not entries:
        return Location()
    chosen = next((a for a in entries if a.get("is_primary")), entries[0])
    return Location(city=str(chosen.get("city") or ""), state=_label(chosen.get("state")))


def split_expertise(items: Iterable[Mapping[str, Any]] | None) -> tuple[str, tuple[str, ...]]:
    """Return ``(title, others)``: primary entries first, order otherwise kept."""
    ordered = sorted(_entries(items), key=lambda item: not item.get("is_primary"))
    names = [str(item.get("area_of_expertise") or "") for item in ordered]
    if not names:
        return "", ()
    return names[0], tuple(n for n in names[1:] if n)


def _languages(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return DEFAULT_LANGUAGES
    names = tuple(str(v) for v in value if v)
    return names or DEFAULT_LANGUAGES


def present(record: Mapping[str, Any]) -> ExpertSummary:
    title, others = split_expertise(record.get("expert_area_of_expertise"))
    return ExpertSummary(
        id=record.get("id"),
        uuid=record.get("uuid"),
        name=display_name(record),
        title=title,
        specialties=others,
        location=primary_address(record.get("expert_address")),
        image_url=record.get("profile_image"),
        is_verified=bool(record.get("profile_claimed")),
        bio=record.get("profile_introduction") or "",
        rating=record.get("rating") or DEFAULT_RATING,
        review_count=record.get("review_count"),
        languages=_languages(record.get("languages")),
        profile_type=record.get("profile_type"),
    )


def present_all(records: Iterable[Mapping[str, Any]]) -> list[ExpertSummary]:
    return [present(r) for r in records]


__all__ = [
    "ExpertSummary",
    "Location",
    "display_name",
    "present",
    "present_all",
    "primary_address",
    "split_expertise",
]
