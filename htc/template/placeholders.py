"""
Плейсхолдеры HTML-шаблонов.

Четыре вида плейсхолдеров, каждый со своим правилом допустимости
в текущем контексте и способом построения узла выражения:

    ${expr}              экранированный текст
    &{expr}              innerHTML одного элемента/шаблона
    @{expr}              innerHTML массива элементов/шаблонов
    ?{expr}{then}{else}  условное выражение
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Type

from .context import in_quoted_attribute, is_top_level
from .errors import UnrecognizedPlaceholderType
from .nodes import (
    ConcatNode,
    ConditionalNode,
    EscapeNode,
    ExpressionNode,
    RawContentArrayNode,
    RawContentNode,
)


@dataclass(frozen=True)
class Placeholder(ABC):
    """
    Базовый класс плейсхолдера.

    Attributes:
        expr: Первый аргумент — выражение целевого языка, как есть
    """
    expr: str

    # символ типа, задаётся подклассами
    type_char = ""

    @abstractmethod
    def allowed(self, context: str) -> bool:
        """Допустима ли вставка в данном контексте."""
        pass

    @abstractmethod
    def build(self) -> ExpressionNode:
        """Строит узел абстрактного выражения."""
        pass


@dataclass(frozen=True)
class EscapedText(Placeholder):
    type_char = "$"

    def allowed(self, context: str) -> bool:
        # вне тегов или внутри значения атрибута в кавычках
        return is_top_level(context) or in_quoted_attribute(context)

    def build(self) -> ExpressionNode:
        return EscapeNode(self.expr)


@dataclass(frozen=True)
class ElementContent(Placeholder):
    type_char = "&"

    def allowed(self, context: str) -> bool:
        return is_top_level(context)

    def build(self) -> ExpressionNode:
        return RawContentNode(self.expr)


@dataclass(frozen=True)
class ElementArrayContent(Placeholder):
    type_char = "@"

    def allowed(self, context: str) -> bool:
        return is_top_level(context)

    def build(self) -> ExpressionNode:
        return RawContentArrayNode(self.expr)


@dataclass(frozen=True)
class Conditional(Placeholder):
    """
    Условный плейсхолдер.

    Допустим в любом контексте: ветки разбираются в том же контексте
    и сами обязаны его не менять (это проверяется при их сборке).
    Отсутствующая ветка — пустая строка.
    """
    then: Optional[ConcatNode] = None
    otherwise: Optional[ConcatNode] = None

    type_char = "?"

    def allowed(self, context: str) -> bool:
        return True

    def build(self) -> ExpressionNode:
        return ConditionalNode(
            self.expr,
            self.then if self.then is not None else ConcatNode(),
            self.otherwise if self.otherwise is not None else ConcatNode(),
        )


PLACEHOLDER_TYPES: Dict[str, Type[Placeholder]] = {
    cls.type_char: cls
    for cls in (EscapedText, ElementContent, ElementArrayContent, Conditional)
}


def create_placeholder(type_char: str, expr: str, branches: Sequence[ConcatNode] = ()) -> Placeholder:
    """
    Создаёт плейсхолдер по символу типа.

    Args:
        type_char: Символ типа ($, &, @, ?)
        expr: Первый аргумент
        branches: Разобранные ветки (только для ?)

    Raises:
        UnrecognizedPlaceholderType: Для неизвестного символа типа
    """
    cls = PLACEHOLDER_TYPES.get(type_char)
    if cls is None:
        raise UnrecognizedPlaceholderType(f"Unrecognized placeholder type ({type_char})")
    if cls is Conditional:
        return Conditional(expr, *branches)
    return cls(expr)


__all__ = [
    "Placeholder",
    "EscapedText",
    "ElementContent",
    "ElementArrayContent",
    "Conditional",
    "PLACEHOLDER_TYPES",
    "create_placeholder",
]
