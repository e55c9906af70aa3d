"""
Сборщик выражения HTML-шаблона.

Накапливает части (литералы и плейсхолдеры) в порядке вывода, после
каждого литерала пересчитывает контекст, а перед приёмом плейсхолдера
проверяет его допустимость. При сборке проверяет, что (под)шаблон
закончился в том же контексте, в котором начался.
"""

from __future__ import annotations

from typing import List

from .context import TOP_LEVEL, advance_context
from .errors import IllFormedTemplate, IllegalPlaceholderInsertion
from .nodes import ConcatNode, ExpressionNode, LiteralNode
from .placeholders import Placeholder


class HTMLExpression:
    """Выражение одного (под)шаблона."""

    def __init__(self, context: str = TOP_LEVEL):
        self.parts: List[ExpressionNode] = []
        self.start_context = context
        self.end_context = context

    def add_literal(self, text: str) -> None:
        self.parts.append(LiteralNode(text))
        self.end_context = advance_context(self.end_context, text)

    def add_placeholder(self, placeholder: Placeholder) -> None:
        if not placeholder.allowed(self.end_context):
            raise IllegalPlaceholderInsertion(
                f"Illegal insertion of placeholder (type {placeholder.type_char}) "
                f"into HTML template (at {self.end_context})"
            )
        self.parts.append(placeholder.build())

    def build(self) -> ConcatNode:
        """
        Returns:
            Последовательность частей (пустая — для пустого шаблона)

        Raises:
            IllFormedTemplate: Если конечный контекст не равен начальному
        """
        if self.start_context != self.end_context:
            raise IllFormedTemplate(f"HTML template is ill-formed (at {self.end_context})")
        return ConcatNode(tuple(self.parts))


__all__ = ["HTMLExpression"]
