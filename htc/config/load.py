from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import BuildConfig, TemplateData
from ..errors import HtcUserError
from ..fs import read_json

logger = logging.getLogger(__name__)

CONFIG_FILE = "htc.yaml"

_yaml = YAML(typ="safe")

_OVERRIDE = re.compile(r"(.*?)=(.*)", re.DOTALL)


class ConfigError(HtcUserError):
    """Invalid htc.yaml contents or malformed KEY=VALUE override."""
    pass


def load_build_config(root: Path) -> BuildConfig:
    """
    Load <root>/htc.yaml.

    • No file — defaults.
    • Empty file — defaults.
    • Unknown keys or wrong value types — ConfigError.
    """
    path = Path(root) / CONFIG_FILE
    if not path.is_file():
        return BuildConfig()

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    try:
        return BuildConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e


def parse_overrides(items: Iterable[str]) -> Dict[str, str]:
    """Parse KEY=VALUE command line overrides (split at the first '=')."""
    result: Dict[str, str] = {}
    for item in items:
        m = _OVERRIDE.fullmatch(item)
        if not m or not m.group(1):
            raise ConfigError(f"Invalid override '{item}'. Expected KEY=VALUE")
        result[m.group(1)] = m.group(2)
    return result


def load_template_data(root: Path, config: BuildConfig, overrides: Dict[str, str] | None = None) -> TemplateData:
    """
    Assemble template data once, before any template is processed.

    Order: package file at top level, then version file merged into
    `meta`, then overrides at top level.
    """
    root = Path(root)
    data: Dict[str, Any] = {}

    if config.package_file:
        data.update(_read_object(root / config.package_file))

    if config.version_file:
        meta = data.get("meta")
        meta = dict(meta) if isinstance(meta, dict) else {}
        meta.update(_read_object(root / config.version_file))
        data["meta"] = meta

    if overrides:
        logger.debug("Applying overrides: %s", ", ".join(sorted(overrides)))
        data.update(overrides)

    return TemplateData(copy.deepcopy(data))


def _read_object(path: Path) -> Dict[str, Any]:
    value = read_json(path)
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return value


__all__ = ["CONFIG_FILE", "ConfigError", "load_build_config", "parse_overrides", "load_template_data"]
