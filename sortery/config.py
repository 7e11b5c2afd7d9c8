"""Loading and validating the JSON sorting configuration.

A configuration file looks like::

    {
        "date_format": "%Y-%m-%d %Hh%Mm%Ss",
        "date_type": "m",
        "exclude_type": ["png"],
        "only_type": ["json", "py"],
        "preserve_name": false
    }

The source and target directories are never stored in the file.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigParseError
from .models import DateKind, SortConfig

DEFAULT_DATE_FORMAT = "%Y-%m-%d %Hh%Mm%Ss"
REQUIRED_KEYS = ("date_format", "date_type", "exclude_type", "only_type", "preserve_name")


@dataclass(slots=True)
class ConfigData:
    """Sorting settings as they appear in a configuration file."""

    date_format: str = DEFAULT_DATE_FORMAT
    date_type: str = DateKind.MODIFIED.value
    exclude_type: list[str] = field(default_factory=list)
    only_type: list[str] = field(default_factory=list)
    preserve_name: bool = False

    def merged(self, **overrides: Any) -> ConfigData:
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)

    def to_sort_config(
        self,
        source_root: str | Path,
        target_root: str | Path,
        *,
        avoid_existing: bool = False,
    ) -> SortConfig:
        return SortConfig.from_payload(
            self.to_payload(),
            source_root,
            target_root,
            avoid_existing=avoid_existing,
        )


def parse_config_payload(text: str) -> ConfigData:
    """Parse and validate a JSON configuration string."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc

    if not isinstance(data, dict):
        raise ConfigParseError("Configuration must be a JSON object")
    return config_from_mapping(data)


def config_from_mapping(data: Mapping[str, Any]) -> ConfigData:
    """Validate an already-decoded payload. All five keys are required."""

    for key in REQUIRED_KEYS:
        if key not in data:
            raise ConfigParseError(f"missing field {key}", path=(key,))

    date_format = data["date_format"]
    if not isinstance(date_format, str) or not date_format:
        raise ConfigParseError("date_format must be a non-empty string", path=("date_format",))

    date_type = data["date_type"]
    valid = {kind.value for kind in DateKind}
    if not isinstance(date_type, str) or date_type not in valid:
        raise ConfigParseError(
            f"date_type must be one of {sorted(valid)}, got {date_type!r}",
            path=("date_type",),
        )

    preserve_name = data["preserve_name"]
    if not isinstance(preserve_name, bool):
        raise ConfigParseError("preserve_name must be true or false", path=("preserve_name",))

    return ConfigData(
        date_format=date_format,
        date_type=date_type,
        exclude_type=_string_list(data["exclude_type"], "exclude_type"),
        only_type=_string_list(data["only_type"], "only_type"),
        preserve_name=preserve_name,
    )


def load_config(path: str | Path) -> ConfigData:
    """Read and validate the configuration file at *path*."""

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigParseError(f"Cannot read configuration file {config_path}: {exc.strerror or exc}") from exc
    return parse_config_payload(text)


def _string_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list):
        raise ConfigParseError(f"{key} must be a list of strings", path=(key,))
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigParseError(f"{key} entries must be strings", path=(key, index))
    return list(value)


__all__ = [
    "ConfigData",
    "DEFAULT_DATE_FORMAT",
    "REQUIRED_KEYS",
    "config_from_mapping",
    "load_config",
    "parse_config_payload",
]
