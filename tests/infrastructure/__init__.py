"""
Unified test infrastructure for the HTML Template Compiler.

Modules:
- file_utils: Utilities for creating files and project layouts
- cli_utils: Utilities for running the CLI as a subprocess
"""

from .file_utils import write, write_json, create_project
from .cli_utils import run_cli

__all__ = [
    "write",
    "write_json",
    "create_project",
    "run_cli",
]
