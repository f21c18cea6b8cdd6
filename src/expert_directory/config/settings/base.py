"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from expert_directory.config.validation.errors import REDACTED


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses filled from ``<PREFIX>_<FIELD>`` variables.

    Validation runs on construction, so an instance is always usable.
    Fields listed in ``_secret_fields`` are masked by :meth:`redacted`.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add range and cross-field checks."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def redacted(self) -> dict[str, Any]:
        """Field values for start-up logging, secrets masked when set."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            out[f.name] = REDACTED if f.name in self._secret_fields and value else value
        return out


__all__ = ["Settings"]
