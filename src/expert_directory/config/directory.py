"""Config – DirectorySettings for the directory search core."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from expert_directory.config.settings.base import Settings
from expert_directory.config.validation import InvalidSettingValueError
from expert_directory.observability.logging import DEFAULT_SENSITIVE_FIELDS, JsonLoggerFactory

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class DirectorySettings(Settings):
    """Settings read from ``DIRECTORY_*`` environment variables."""

    _prefix: ClassVar[str] = "DIRECTORY"
    _secret_fields: ClassVar[frozenset[str]] = frozenset({"api_token"})

    api_base_url: str = "http://localhost:3000/api"
    directory_path: str = "/experts/expert_directory/"
    api_token: str = ""
    timeout_seconds: float = 10.0
    retry_attempts: int = 1
    query_debounce_seconds: float = 0.5
    facet_search_debounce_seconds: float = 0.3
    log_level: str = "INFO"

    def _invalid(self, name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(self.env_key(name), getattr(self, name), reason)

    def _validate(self) -> None:
        if self.timeout_seconds <= 0:
            raise self._invalid("timeout_seconds", "must be > 0")
        if self.retry_attempts < 1:
            raise self._invalid("retry_attempts", "must be >= 1")
        for name in ("query_debounce_seconds", "facet_search_debounce_seconds"):
            if getattr(self, name) < 0:
                raise self._invalid(name, "must be >= 0")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise self._invalid("log_level", "unknown log level")
        if not self.directory_path.startswith("/"):
            raise self._invalid("directory_path", "must start with '/'")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def configure_logging(self) -> None:
        """Install JSON logging at ``log_level``; secret settings are redacted as well."""
        JsonLoggerFactory.configure(
            level=self.log_level_number,
            sensitive_fields=DEFAULT_SENSITIVE_FIELDS | self._secret_fields,
        )


__all__ = ["DirectorySettings"]
