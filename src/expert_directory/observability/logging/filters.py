"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any, Mapping

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "token", "password", "email", "phone"}
)


class SensitiveFieldsFilter:
    """structlog processor that masks credentials and expert contact details.

    A key is sensitive when it equals a configured name or ends with
    ``_<name>`` (``api_token``, ``expert_email``, ``contact_phone``).
    Nested mappings and lists of mappings, such as raw directory records,
    are walked.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: str) -> bool:
        lowered = key.lower()
        return lowered in self._fields or any(lowered.endswith(f"_{f}") for f in self._fields)

    def _walk(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact(value)
        if isinstance(value, list):
            return [self._walk(v) for v in value]
        if isinstance(value, tuple):
            return tuple(self._walk(v) for v in value)
        return value

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            k: (self.REDACTED if isinstance(k, str) and self.is_sensitive(k) else self._walk(v))
            for k, v in data.items()
        }

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
