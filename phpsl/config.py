"""Run configuration: built-in defaults plus an optional YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml

from .errors import ConfigError
from .utils import read_yaml_file

DEFAULT_CONFIG_FILENAME = ".php-sl.yaml"
DEFAULT_EXCLUDE_PATHS = (
    "vendor",
    ".git",
    ".github",
    ".gitlab",
    ".azure-pipelines",
    ".husky",
    ".circleci",
    ".vscode",
    ".idea",
)
OUTPUT_FORMATS = ("text", "json")
KNOWN_KEYS = {"exclude", "exclude_rules", "format"}


def split_list(values: Any) -> List[str]:
    """Flatten comma-separated strings and lists into unique trimmed items."""

    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, (list, tuple)):
        raise ConfigError(f"Expected a list or comma-separated string, got {type(values).__name__}")

    items: List[str] = []
    for value in values:
        for part in str(value).split(","):
            part = part.strip()
            if part and part not in items:
                items.append(part)
    return items


def _merge(first: Iterable[str], second: Iterable[str]) -> List[str]:
    merged = list(first)
    for item in second:
        if item not in merged:
            merged.append(item)
    return merged


@dataclass
class Config:
    """Settings the command line hands to the linter."""

    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATHS))
    exclude_rules: List[str] = field(default_factory=list)
    format: str = "text"

    def merge(
        self,
        exclude: Iterable[str] = (),
        exclude_rules: Iterable[str] = (),
        report_format: Optional[str] = None,
    ) -> "Config":
        return replace(
            self,
            exclude=_merge(self.exclude, exclude),
            exclude_rules=_merge(self.exclude_rules, (rule_id.upper() for rule_id in exclude_rules)),
            format=report_format or self.format,
        )


def load_config(path: Optional[str] = None) -> Config:
    """Load ``path``, or ``.php-sl.yaml`` from the working directory.

    An explicit path must exist; the implicit default is optional.
    """

    if path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)
        if not config_path.is_file():
            return Config()
    else:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = read_yaml_file(config_path)
    except (yaml.YAMLError, OSError) as exc:
        raise ConfigError(f"Could not read config file {config_path}: {exc}") from exc

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    unknown = sorted(map(str, set(data) - KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    report_format = data.get("format", "text")
    if report_format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unsupported format {report_format!r}; expected one of {', '.join(OUTPUT_FORMATS)}")

    return Config().merge(
        exclude=split_list(data.get("exclude")),
        exclude_rules=split_list(data.get("exclude_rules")),
        report_format=report_format,
    )
