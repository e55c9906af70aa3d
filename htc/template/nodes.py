"""
Узлы абстрактного выражения.

Результат разбора шаблона — неизменяемое дерево, которое затем
переводится эмиттером в текст целевого языка. Аргументы плейсхолдеров
хранятся дословно: компилятор их не разбирает и не проверяет.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ExpressionNode:
    """Базовый класс для всех узлов выражения."""
    pass


@dataclass(frozen=True)
class LiteralNode(ExpressionNode):
    """Разэкранированный текст шаблона, выводится как строковый литерал."""
    text: str


@dataclass(frozen=True)
class EscapeNode(ExpressionNode):
    """$ : текст, экранируемый при выполнении."""
    expr: str


@dataclass(frozen=True)
class RawContentNode(ExpressionNode):
    """& : innerHTML одного элемента или шаблона (уже безопасный HTML)."""
    expr: str


@dataclass(frozen=True)
class RawContentArrayNode(ExpressionNode):
    """@ : конкатенация innerHTML массива элементов или шаблонов."""
    expr: str


@dataclass(frozen=True)
class ConcatNode(ExpressionNode):
    """
    Упорядоченная последовательность частей.

    Порядок частей — порядок вывода. Пустая последовательность
    соответствует пустой строке.
    """
    parts: Tuple[ExpressionNode, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.parts


@dataclass(frozen=True)
class ConditionalNode(ExpressionNode):
    """? : выбор ветки по истинности выражения."""
    expr: str
    then: ConcatNode = field(default_factory=ConcatNode)
    otherwise: ConcatNode = field(default_factory=ConcatNode)


__all__ = [
    "ExpressionNode",
    "LiteralNode",
    "EscapeNode",
    "RawContentNode",
    "RawContentArrayNode",
    "ConcatNode",
    "ConditionalNode",
]
