from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, ConfigDict

from ..render.dialects import DEFAULT_DIALECT


class BuildConfig(BaseModel):
    """
    Project-level build settings (htc.yaml).

    Paths are relative to the project root. Setting package_file or
    version_file to null skips that source of template data.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    package_file: Optional[str] = "package.json"
    version_file: Optional[str] = "version.json"
    src_dir: str = "src"
    css_dir: str = "src/css"
    dialect: str = DEFAULT_DIALECT


class TemplateData(Mapping):
    """
    Read-only view over the data exposed to `<%= %>` interpolations.

    Nested objects are wrapped on access, so `meta.name` works both as
    attribute and item lookup. Built once per build, never mutated.
    """

    def __init__(self, values: Dict[str, Any]):
        self._values = dict(values)

    def __getitem__(self, key: str) -> Any:
        return _wrap(self._values[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"TemplateData({self._values!r})"


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return TemplateData(value)
    if isinstance(value, list):
        return tuple(_wrap(v) for v in value)
    return value


__all__ = ["BuildConfig", "TemplateData"]
