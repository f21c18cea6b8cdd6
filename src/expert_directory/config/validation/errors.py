"""Config validation errors.

Messages name the environment variable (``DIRECTORY_TIMEOUT_SECONDS``)
rather than the dataclass field so they can be acted on directly.  Values
of secret-looking settings never appear in a message.
"""
from __future__ import annotations

from expert_directory.kernel.errors import ApplicationError

_SECRET_SUFFIXES = ("token", "password", "secret")
REDACTED = "[REDACTED]"


def _shown(setting_name: str, value: object) -> str:
    if setting_name.lower().endswith(_SECRET_SUFFIXES):
        return REDACTED
    return repr(value)


class ConfigError(ApplicationError):
    """Configuration is invalid or could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is required but not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but out of range or not coercible."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={_shown(setting_name, value)}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "REDACTED"]
