"""Domain errors – filter invariants and input validation."""

from __future__ import annotations

from typing import Any

from expert_directory.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A filter or pagination invariant was violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """One or more fields failed validation.

    Each entry of ``errors`` is ``{"field": ..., "message": ...}``.  Build it
    incrementally with :meth:`add` and raise once with :meth:`raise_if_any`
    so the caller sees every failing field, not only the first.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    def add(self, field: str, message: str) -> None:
        self.errors.append({"field": field, "message": message})

    @property
    def fields(self) -> list[str]:
        return [e.get("field", "") for e in self.errors]

    def raise_if_any(self) -> None:
        if self.errors:
            raise self

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


__all__ = ["DomainError", "ValidationError"]
