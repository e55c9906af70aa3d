"""
Подстановка `<%= expr %>` в тексте исходников.

Выполняется до компилятора HTML-шаблонов: компилятор видит уже
подставленный текст. Выражения не являются кодом целевого языка и не
исполняются: поддерживается только путь через точки и, при
необходимости, вызов с литеральными аргументами:

    <%= meta.name %>
    <%= importCSS('style', 'mascots') %>
    <%= html('<b>${name}</b>') %>
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, List

from .errors import HtcUserError

logger = logging.getLogger(__name__)

_INTERPOLATE = re.compile(r"<%=(.+?)%>", re.DOTALL)

_NAME = r"[A-Za-z_$][\w$]*"
_EXPRESSION = re.compile(
    rf"\s*(?P<path>{_NAME}(?:\s*\.\s*{_NAME})*)\s*(?:\((?P<args>.*)\))?\s*",
    re.DOTALL,
)
_ARGUMENT = re.compile(
    r"""\s*(?P<value>'(?:\\.|[^'\\])*'|"(?:\\.|[^"\\])*"|-?\d+(?:\.\d+)?|true|false|null)\s*""",
    re.DOTALL,
)
_STRING_ESCAPE = re.compile(r"\\(u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}

_KEYWORDS = {"true": True, "false": False, "null": None}


class InterpolationError(HtcUserError):
    """Ошибка разбора или вычисления выражения `<%= %>`."""
    pass


def interpolate(text: str, scope: Mapping) -> str:
    """
    Заменяет все вхождения `<%= expr %>` значениями выражений.

    Args:
        text: Исходный текст
        scope: Имена, доступные выражениям (данные сборки и хелперы)

    Returns:
        Текст с подставленными значениями
    """
    def replace(m: re.Match) -> str:
        return to_text(evaluate(m.group(1), scope))

    return _INTERPOLATE.sub(replace, text)


def evaluate(expression: str, scope: Mapping) -> Any:
    """Вычисляет одно выражение в заданной области видимости."""
    m = _EXPRESSION.fullmatch(expression)
    if not m:
        raise InterpolationError(f"Cannot parse interpolation '{expression.strip()}'")

    path = [part.strip() for part in m.group("path").split(".")]
    value = scope.get(path[0])
    for attr in path[1:]:
        value = _lookup(value, attr)

    if m.group("args") is None:
        return value

    if not callable(value):
        raise InterpolationError(f"'{m.group('path').strip()}' is not a function")
    args = _parse_arguments(m.group("args"))
    logger.debug("Calling %s with %d argument(s)", m.group("path").strip(), len(args))
    return value(*args)


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(v) for v in value)
    return str(value)


def _lookup(value: Any, attr: str) -> Any:
    # отсутствующее свойство даёт undefined, а не ошибку
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(attr)
    return getattr(value, attr, None)


def _parse_arguments(text: str) -> List[Any]:
    args: List[Any] = []
    if not text.strip():
        return args

    pos = 0
    while True:
        m = _ARGUMENT.match(text, pos)
        if not m:
            raise InterpolationError(f"Unsupported argument list ({text})")
        args.append(_literal(m.group("value")))
        pos = m.end()
        if pos == len(text):
            return args
        if text[pos] != ",":
            raise InterpolationError(f"Unsupported argument list ({text})")
        pos += 1


def _literal(token: str) -> Any:
    if token in _KEYWORDS:
        return _KEYWORDS[token]
    if token[0] in "'\"":
        return _STRING_ESCAPE.sub(_unescape, token[1:-1])
    return float(token) if "." in token else int(token)


def _unescape(m: re.Match) -> str:
    seq = m.group(1)
    if len(seq) > 1:
        return chr(int(seq[1:], 16))
    if seq == "\n":
        # продолжение строки
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


__all__ = ["InterpolationError", "interpolate", "evaluate", "to_text"]
