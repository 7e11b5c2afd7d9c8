"""Sortery: sort files into date-named folders."""

from .config import ConfigData, load_config, parse_config_payload
from .errors import (
    ConfigParseError,
    MetadataUnavailable,
    RenameFailed,
    SorteryError,
    SourceRootMissing,
    TimestampKindUnsupported,
)
from .models import DateKind, PlanEntry, SortConfig, SortPlan, SortResult
from .sorter import Sorter, plan_and_execute

__all__ = [
    "ConfigData",
    "ConfigParseError",
    "DateKind",
    "MetadataUnavailable",
    "PlanEntry",
    "RenameFailed",
    "SortConfig",
    "SortPlan",
    "SortResult",
    "Sorter",
    "SorteryError",
    "SourceRootMissing",
    "TimestampKindUnsupported",
    "load_config",
    "parse_config_payload",
    "plan_and_execute",
]
