"""
Диалекты целевого языка.

Диалект задаёт конкретный синтаксис вызова экранирования, доступа
к innerHTML, хелпера конкатенации и тернарного выражения. Аргументы
плейсхолдеров встраиваются как есть, между фиксированными разделителями.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Dict, Sequence, Type

from ..errors import HtcUserError


class UnknownDialectError(HtcUserError):
    """Запрошен незарегистрированный диалект."""
    pass


def json_string(text: str) -> str:
    """Строковый литерал в JSON-нотации (не-ASCII символы не экранируются)."""
    return json.dumps(text, ensure_ascii=False)


class Dialect(ABC):
    """Контракт рендеринга абстрактного выражения в текст целевого языка."""

    name = ""

    @abstractmethod
    def literal(self, text: str) -> str:
        pass

    def empty(self) -> str:
        return '""'

    @abstractmethod
    def escape(self, expr: str) -> str:
        pass

    @abstractmethod
    def raw(self, expr: str) -> str:
        pass

    @abstractmethod
    def raw_array(self, expr: str) -> str:
        pass

    @abstractmethod
    def conditional(self, cond: str, then: str, otherwise: str) -> str:
        pass

    def concat(self, parts: Sequence[str]) -> str:
        return " + ".join(parts)

    @abstractmethod
    def element(self, content: str) -> str:
        """Объект вида {innerHTML: content} — результат html()."""
        pass

    @abstractmethod
    def assertion(self, statement: str) -> str:
        pass


class CoffeeScriptDialect(Dialect):
    """
    CoffeeScript со встроенным JS.

    Аргументы оборачиваются обратными кавычками, поэтому внутри них
    обратная кавычка запрещена грамматикой шаблонов.
    """

    name = "coffee"

    @staticmethod
    def _embed(expr: str) -> str:
        return f"`{expr}`"

    def literal(self, text: str) -> str:
        return self._embed(json_string(text).replace("`", "\\`"))

    def escape(self, expr: str) -> str:
        return f"E({self._embed(expr)})"

    def raw(self, expr: str) -> str:
        return f"{self._embed(expr)}.innerHTML"

    def raw_array(self, expr: str) -> str:
        return f"E.cat({self._embed(expr)})"

    def conditional(self, cond: str, then: str, otherwise: str) -> str:
        return f"(if {self._embed(cond)} then {then} else {otherwise})"

    def element(self, content: str) -> str:
        return f"(innerHTML: {content})"

    def assertion(self, statement: str) -> str:
        return f"throw new Error 'Assertion failed: ' + {self.literal(statement)} unless {statement}"


class JavaScriptDialect(Dialect):
    name = "js"

    def literal(self, text: str) -> str:
        return json_string(text)

    def escape(self, expr: str) -> str:
        return f"E({expr})"

    def raw(self, expr: str) -> str:
        return f"({expr}).innerHTML"

    def raw_array(self, expr: str) -> str:
        return f"E.cat({expr})"

    def conditional(self, cond: str, then: str, otherwise: str) -> str:
        return f"(({cond}) ? {then} : {otherwise})"

    def element(self, content: str) -> str:
        return f"{{innerHTML: {content}}}"

    def assertion(self, statement: str) -> str:
        return f"if (!({statement})) {{ throw new Error('Assertion failed: ' + {self.literal(statement)}); }}"


DIALECTS: Dict[str, Type[Dialect]] = {
    cls.name: cls for cls in (CoffeeScriptDialect, JavaScriptDialect)
}

DEFAULT_DIALECT = CoffeeScriptDialect.name


def get_dialect(name: str = DEFAULT_DIALECT) -> Dialect:
    cls = DIALECTS.get(name)
    if cls is None:
        raise UnknownDialectError(
            f"Unknown dialect '{name}'. Available: {', '.join(sorted(DIALECTS))}"
        )
    return cls()


__all__ = [
    "Dialect",
    "CoffeeScriptDialect",
    "JavaScriptDialect",
    "UnknownDialectError",
    "DIALECTS",
    "DEFAULT_DIALECT",
    "get_dialect",
    "json_string",
]
