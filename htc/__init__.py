"""
HTML Template Compiler.

Compiles HTML templates with ${}, &{}, @{} and ?{}{}{} placeholders into
CoffeeScript or JavaScript expressions, rejecting unsafe insertions at
compile time.
"""

from __future__ import annotations

from .compiler import compile_element, compile_template
from .errors import HtcUserError

__all__ = ["compile_template", "compile_element", "HtcUserError"]
