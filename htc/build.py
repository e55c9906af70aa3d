"""
Build pipeline: source file → `<%= %>` substitution → target file.

BuildContext carries the immutable configuration and template data of a
single build and exposes the helper functions that interpolations may
call (html, importHTML, importCSS, assert, read, readJSON, readBase64, ls).
"""

from __future__ import annotations

import json
import logging
import re
from collections import ChainMap
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

from .compiler import compile_element
from .config import (
    BuildConfig,
    ConfigError,
    TemplateData,
    load_build_config,
    load_template_data,
    parse_overrides,
)
from .fs import list_dir, read_base64, read_json, read_text, write_text
from .interpolation import interpolate
from .render.dialects import Dialect, get_dialect

logger = logging.getLogger(__name__)

_LEADING_SPACES = re.compile(r"^ +", re.MULTILINE)
_LINE_BREAKS = re.compile(r"\r?\n")
_BLANK_LINES = re.compile(r"\n+")
_LINES = re.compile(r"[^\n]*\n|[^\n]+")

# reserved: data under these keys would be hidden by the helpers in the scope
HELPER_NAMES = frozenset({
    "html", "importHTML", "importCSS", "assert", "read", "readJSON", "readBase64", "ls",
})


class BuildContext:
    """
    Everything one build needs, constructed once up front.

    Args:
        root: Project root; helper paths are resolved against it
        config: Build settings
        data: Template data (package/version metadata and overrides)
        dialect: Target language dialect; defaults to config.dialect
    """

    def __init__(
            self,
            root: Path,
            config: BuildConfig,
            data: TemplateData,
            dialect: Optional[Dialect] = None,
    ):
        self.root = Path(root)
        self.config = config
        self.data = data
        self.dialect = dialect or get_dialect(config.dialect)
        self.scope = ChainMap(self._helpers(), data)

    def _helpers(self) -> Dict[str, Callable[..., Any]]:
        return {
            "html": self.html,
            "importHTML": self.import_html,
            "importCSS": self.import_css,
            "assert": self.assertion,
            "read": lambda name: read_text(self.root / name),
            "readJSON": lambda name: read_json(self.root / name),
            "readBase64": lambda name: read_base64(self.root / name),
            "ls": lambda name: list_dir(self.root / name),
        }

    def render(self, text: str) -> str:
        return interpolate(text, self.scope)

    def html(self, template: str) -> str:
        """Compile an HTML template into an {innerHTML: ...} expression."""
        return compile_element(template, dialect=self.dialect)

    def import_html(self, name: str) -> str:
        text = read_text(self.root / self.config.src_dir / f"{name}.html")
        text = _LINE_BREAKS.sub("", _LEADING_SPACES.sub("", text))
        logger.debug("Importing HTML template %s", name)
        return self.html(self.render(text))

    def import_css(self, *names: str) -> str:
        """
        Concatenate stylesheets into a sum of string literals, one per line.
        """
        text = "".join(read_text(self.root / self.config.css_dir / f"{name}.css") for name in names)
        text = _BLANK_LINES.sub("\n", self.render(text).strip())
        lines = [json.dumps(line, ensure_ascii=False) for line in _LINES.findall(text) or [""]]
        return " +\n".join(lines).replace("`", "\\`")

    def assertion(self, statement: str) -> str:
        if not self.data.get("tests_enabled"):
            return ""
        return self.dialect.assertion(statement)


def create_build_context(
        root: Path,
        overrides: Iterable[str] = (),
        dialect: Optional[str] = None,
) -> BuildContext:
    root = Path(root)
    config = load_build_config(root)
    parsed = parse_overrides(overrides)
    reserved = sorted(HELPER_NAMES.intersection(parsed))
    if reserved:
        raise ConfigError(f"Cannot override reserved helper name(s): {', '.join(reserved)}")
    data = load_template_data(root, config, parsed)
    return BuildContext(root, config, data, get_dialect(dialect or config.dialect))


def run_build(
        source: Path,
        target: Path,
        overrides: Iterable[str] = (),
        root: Optional[Path] = None,
        dialect: Optional[str] = None,
) -> str:
    """
    Render `source` and write the result to `target`.

    Returns:
        The rendered text
    """
    ctx = create_build_context(root or Path.cwd(), overrides, dialect)
    logger.debug("Building %s -> %s (dialect %s)", source, target, ctx.dialect.name)
    output = ctx.render(read_text(Path(source)))
    write_text(Path(target), output)
    return output


__all__ = ["BuildContext", "create_build_context", "run_build"]
