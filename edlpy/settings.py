"""User-facing settings for the EDL language service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

CONFIGURATION_SECTION: Final[str] = "edl"

_LINTING_KEY: Final[str] = "linting.enabled"
_INTELLISENSE_KEY: Final[str] = "intellisense.enabled"


@dataclass(frozen=True, slots=True)
class EdlSettings:
    """Feature flags controlling diagnostics and completion."""

    linting_enabled: bool = True
    intellisense_enabled: bool = True

    @staticmethod
    def from_mapping(values: Mapping[str, Any]) -> "EdlSettings":
        """Read settings from dotted (`linting.enabled`) or nested (`{"linting": {...}}`) keys.

        Settings may sit under an `edl` section. Missing keys keep their defaults.
        """
        section = values.get(CONFIGURATION_SECTION)
        if isinstance(section, Mapping):
            values = section
        return EdlSettings(
            linting_enabled=_read_bool(values, _LINTING_KEY, default=True),
            intellisense_enabled=_read_bool(values, _INTELLISENSE_KEY, default=True),
        )

    def to_mapping(self) -> dict[str, bool]:
        return {
            _LINTING_KEY: self.linting_enabled,
            _INTELLISENSE_KEY: self.intellisense_enabled,
        }


def _read_bool(values: Mapping[str, Any], dotted_key: str, *, default: bool) -> bool:
    value = _lookup(values, dotted_key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Setting `{CONFIGURATION_SECTION}.{dotted_key}` must be a bool, got {value!r}")
    return value


def _lookup(values: Mapping[str, Any], dotted_key: str) -> Any:
    if dotted_key in values:
        return values[dotted_key]
    current: Any = values
    for part in dotted_key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current
