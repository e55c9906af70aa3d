"""
Курсор по оставшемуся тексту шаблона.

Единственный способ продвинуться вперёд — eat(): сопоставление шаблона
с началом оставшегося текста. Истории нет, откатов между альтернативами
тоже: каждый успешный шаг окончателен.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union


class TextCursor:
    """Изменяемое представление оставшегося входного текста."""

    def __init__(self, text: str):
        self.text = text

    def eat(self, pattern: Union[str, Pattern[str]]) -> Optional[re.Match]:
        """
        Пытается сопоставить pattern с началом оставшегося текста.

        Args:
            pattern: Регулярное выражение (строка или скомпилированное)

        Returns:
            Объект совпадения (с группами) или None. При успехе курсор
            сдвигается за совпавший текст, при неудаче не меняется.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        match = pattern.match(self.text)
        if match:
            self.text = self.text[match.end():]
        return match

    def __bool__(self) -> bool:
        return bool(self.text)

    def __repr__(self) -> str:
        return f"TextCursor({self.text!r})"


__all__ = ["TextCursor"]
