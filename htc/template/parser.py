"""
Парсер HTML-шаблонов с рекурсивным спуском.

Грамматика:
    template     → (literal | placeholder)*
    literal      → ( [^\\{}] | '\\' any )+        не заканчивается перед '{'
    placeholder  → type '{' args '}' branch? branch?    ветки только для '?'
    branch       → '{' template '}'

Ветки условных плейсхолдеров разбираются рекурсивно в контексте,
действующем в точке плейсхолдера ? (после всех предшествующих
литералов кадра). Ошибки, возникшие на любой глубине, при выходе
из каждого кадра дополняются текстом, который оставался на входе
в момент начала этого кадра.
"""

from __future__ import annotations

import logging
import re
from typing import List

from .context import TOP_LEVEL
from .cursor import TextCursor
from .errors import (
    TemplateError,
    TemplateNestingTooDeep,
    UnexpectedCharacters,
    UnexpectedCharactersInSubtemplate,
)
from .expression import HTMLExpression
from .nodes import ConcatNode
from .placeholders import create_placeholder

logger = logging.getLogger(__name__)

# символы, не обозначающие начало или конец плейсхолдера; '\' экранирует
_LITERAL = re.compile(r"(?:[^\\{}]|\\.)+(?!\{)")
# символ типа и первый аргумент в {}; обратная кавычка в аргументе
# запрещена, так как завершила бы встроенный JS в CoffeeScript
_PLACEHOLDER = re.compile(r"([^}])\{([^}`]*)\}")
_BRANCH_START = re.compile(r"\{")
_BRANCH_END = re.compile(r"\}")
_ESCAPE = re.compile(r"\\(.)")

# условный плейсхолдер принимает не более двух веток
MAX_BRANCHES = 2
DEFAULT_MAX_DEPTH = 64


class HTMLTemplateParser:
    """
    Рекурсивный парсер HTML-шаблонов.

    Один экземпляр обслуживает один вызов компиляции; состояние между
    вызовами не разделяется.
    """

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH):
        self.cursor = TextCursor(text)
        self.max_depth = max_depth

    def parse(self, context: str = TOP_LEVEL) -> ConcatNode:
        """
        Разбирает шаблон верхнего уровня.

        Returns:
            Собранное выражение шаблона

        Raises:
            TemplateError: При любой синтаксической ошибке или ошибке контекста
        """
        template = self.cursor.text
        expression = self._parse_template(context, depth=0)
        if self.cursor:
            raise UnexpectedCharacters(
                f"Unexpected characters in template ({self.cursor.text}): {template}"
            )
        return expression

    def _parse_template(self, context: str, depth: int) -> ConcatNode:
        template = self.cursor.text  # текст от начала кадра, для сообщений об ошибках
        expression = HTMLExpression(context)

        try:
            if depth > self.max_depth:
                raise TemplateNestingTooDeep(
                    f"Conditional placeholders nested deeper than {self.max_depth} levels"
                )

            while self.cursor:
                match = self.cursor.eat(_LITERAL)
                if match:
                    expression.add_literal(_ESCAPE.sub(r"\1", match.group(0)))
                    continue

                match = self.cursor.eat(_PLACEHOLDER)
                if match:
                    type_char, expr = match.group(1), match.group(2)
                    branches = self._parse_branches(expression.end_context, depth) if type_char == "?" else []
                    expression.add_placeholder(create_placeholder(type_char, expr, branches))
                    continue

                # конец подшаблона ('}' дальше) или ошибка — решает вызывающий
                break

            return expression.build()

        except TemplateError as e:
            raise e.within(template) from e

    def _parse_branches(self, context: str, depth: int) -> List[ConcatNode]:
        branches: List[ConcatNode] = []
        while len(branches) < MAX_BRANCHES and self.cursor.eat(_BRANCH_START):
            branches.append(self._parse_template(context, depth + 1))
            if not self.cursor.eat(_BRANCH_END):
                raise UnexpectedCharactersInSubtemplate(
                    f"Unexpected characters in subtemplate ({self.cursor.text})"
                )
        logger.debug("Parsed conditional with %d branch(es) at depth %d", len(branches), depth)
        return branches


def parse_template(text: str, context: str = TOP_LEVEL, max_depth: int = DEFAULT_MAX_DEPTH) -> ConcatNode:
    """Разбирает текст шаблона в абстрактное выражение."""
    return HTMLTemplateParser(text, max_depth=max_depth).parse(context)


__all__ = ["HTMLTemplateParser", "parse_template", "DEFAULT_MAX_DEPTH"]
