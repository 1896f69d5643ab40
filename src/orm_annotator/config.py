"""Load and represent annotator.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from orm_annotator.paths import config_path


@dataclass
class AnnotatorConfig:
    """Which modules and classes the annotator may rewrite.

    Generation is off by default; enable it only in local development so
    files never change on a production checkout.
    """

    enabled: bool = False
    enabled_modules: list[str] = field(default_factory=lambda: ["mysite"])
    disabled_classes: list[str] = field(default_factory=list)


def load_config(path: Path | str | None = None) -> AnnotatorConfig:
    """Read annotator.yaml.

    Args:
        path: Path to the config file. Defaults to paths.config_path().

    Returns:
        AnnotatorConfig. A missing file yields the defaults.

    Raises:
        ValueError: If the file is not a YAML mapping.
        yaml.YAMLError: If the YAML is malformed.
    """
    cfg_path = Path(path) if path else config_path()
    if not cfg_path.is_file():
        return AnnotatorConfig()

    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return AnnotatorConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config at {cfg_path} is not a YAML mapping")

    defaults = AnnotatorConfig()
    return AnnotatorConfig(
        enabled=bool(data.get("enabled", defaults.enabled)),
        enabled_modules=_name_list(data, "enabled_modules", defaults.enabled_modules, cfg_path),
        disabled_classes=_name_list(data, "disabled_classes", defaults.disabled_classes, cfg_path),
    )


def _name_list(data: dict, key: str, default: list[str], cfg_path: Path) -> list[str]:
    # an explicit empty list is kept; only a missing or null key falls back
    value = data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise ValueError(f"'{key}' in {cfg_path} must be a list, got {type(value).__name__}")
    return [str(v) for v in value]
