"""
File readers used by the build helpers.

All failures (missing file, undecodable bytes, invalid JSON) propagate
unmodified: a build has no meaningful degraded mode.
"""

from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any, List


def read_text(path: Path) -> str:
    """Read UTF-8 text with CRLF line endings normalized to LF."""
    return Path(path).read_bytes().decode("utf-8").replace("\r\n", "\n")


def read_json(path: Path) -> Any:
    return json.loads(read_text(path))


def read_base64(path: Path) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def list_dir(path: Path) -> List[str]:
    return sorted(p.name for p in Path(path).iterdir())


def write_text(path: Path, text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


__all__ = ["read_text", "read_json", "read_base64", "list_dir", "write_text"]
