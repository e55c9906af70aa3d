"""
Компилятор HTML-шаблонов с проверкой безопасности вставок.

Шаблон — HTML-подобный текст с плейсхолдерами ${}, &{}, @{} и ?{}{}{}.
Для каждого плейсхолдера по лексической структуре определяется, где он
стоит: вне тегов, внутри тега или внутри значения атрибута в кавычках,
и небезопасные вставки отвергаются на этапе компиляции.
"""

from __future__ import annotations

from .errors import (
    IllFormedTemplate,
    IllegalPlaceholderInsertion,
    TemplateError,
    TemplateNestingTooDeep,
    UnexpectedCharacters,
    UnexpectedCharactersInSubtemplate,
    UnrecognizedPlaceholderType,
)
from .parser import HTMLTemplateParser, parse_template

__all__ = [
    "parse_template",
    "HTMLTemplateParser",
    "TemplateError",
    "UnexpectedCharacters",
    "UnexpectedCharactersInSubtemplate",
    "UnrecognizedPlaceholderType",
    "IllegalPlaceholderInsertion",
    "IllFormedTemplate",
    "TemplateNestingTooDeep",
]
