"""
Точка входа компилятора HTML-шаблонов.

compile_template() — чистая функция: одинаковые входные данные всегда
дают одинаковый результат, состояние между вызовами не сохраняется.
"""

from __future__ import annotations

import logging
from typing import Optional

from .template.context import TOP_LEVEL
from .template.parser import DEFAULT_MAX_DEPTH, parse_template
from .render.dialects import Dialect, get_dialect
from .render.emitter import CodeEmitter

logger = logging.getLogger(__name__)


def compile_template(
        text: str,
        context: str = TOP_LEVEL,
        dialect: Optional[Dialect] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """
    Компилирует HTML-шаблон в выражение целевого языка.

    Args:
        text: Текст шаблона
        context: Окружающий контекст (по умолчанию — верхний уровень)
        dialect: Диалект целевого языка (по умолчанию CoffeeScript)
        max_depth: Предельная глубина вложенности условных плейсхолдеров

    Returns:
        Выражение, конкатенирующее части шаблона, или "" для пустого

    Raises:
        TemplateError: При ошибке разбора или небезопасной вставке
    """
    ast = parse_template(text, context, max_depth=max_depth)
    output = CodeEmitter(dialect or get_dialect()).render(ast)
    logger.debug("Compiled template of %d chars into %d part(s)", len(text), len(ast.parts))
    return output


def compile_element(text: str, dialect: Optional[Dialect] = None) -> str:
    """Компилирует шаблон верхнего уровня и оборачивает его в объект {innerHTML: ...}."""
    dialect = dialect or get_dialect()
    return dialect.element(compile_template(text, dialect=dialect))


__all__ = ["compile_template", "compile_element"]
