"""
Эмиттер кода: абстрактное выражение → текст целевого языка.

Чистая функция без состояния; весь конкретный синтаксис берётся
из диалекта.
"""

from __future__ import annotations

from ..template.nodes import (
    ConcatNode,
    ConditionalNode,
    EscapeNode,
    ExpressionNode,
    LiteralNode,
    RawContentArrayNode,
    RawContentNode,
)
from .dialects import Dialect


class CodeEmitter:
    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def render(self, node: ExpressionNode) -> str:
        d = self.dialect
        if isinstance(node, ConcatNode):
            if node.is_empty:
                return d.empty()
            return d.concat([self.render(part) for part in node.parts])
        if isinstance(node, LiteralNode):
            return d.literal(node.text)
        if isinstance(node, EscapeNode):
            return d.escape(node.expr)
        if isinstance(node, RawContentNode):
            return d.raw(node.expr)
        if isinstance(node, RawContentArrayNode):
            return d.raw_array(node.expr)
        if isinstance(node, ConditionalNode):
            return d.conditional(node.expr, self.render(node.then), self.render(node.otherwise))
        raise TypeError(f"Unsupported expression node: {type(node).__name__}")


__all__ = ["CodeEmitter"]
