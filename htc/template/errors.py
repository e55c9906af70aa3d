"""
Ошибки компиляции HTML-шаблонов.

Все ошибки фатальны: любая из них прерывает компиляцию целиком,
частичный результат не формируется. При подъёме по стеку рекурсивного
спуска каждый кадр дописывает к сообщению текст своего (под)шаблона,
так что итоговая ошибка указывает и на причину, и на весь фрагмент.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import HtcUserError


class TemplateError(HtcUserError):
    """
    Базовая ошибка разбора шаблона.

    Attributes:
        message: Исходное сообщение о причине ошибки
        fragments: Тексты (под)шаблонов, от внутреннего к внешнему
    """

    def __init__(self, message: str, fragments: Tuple[str, ...] = ()):
        self.message = message
        self.fragments = tuple(fragments)
        super().__init__(": ".join((message,) + self.fragments))

    def within(self, fragment: str) -> "TemplateError":
        """Возвращает ошибку того же типа с дописанным фрагментом шаблона."""
        return type(self)(self.message, self.fragments + (fragment,))


class UnexpectedCharacters(TemplateError):
    """Остаток текста не является ни литералом, ни плейсхолдером."""


class UnexpectedCharactersInSubtemplate(TemplateError):
    """Ветка условного плейсхолдера не завершилась ожидаемой '}'."""


class UnrecognizedPlaceholderType(TemplateError):
    """Тип плейсхолдера вне набора $, &, @, ?."""


class IllegalPlaceholderInsertion(TemplateError):
    """Плейсхолдер недопустим в текущем HTML-контексте."""


class IllFormedTemplate(TemplateError):
    """Контекст в конце (под)шаблона отличается от начального."""


class TemplateNestingTooDeep(TemplateError):
    """Превышена допустимая глубина вложенности условных плейсхолдеров."""


__all__ = [
    "TemplateError",
    "UnexpectedCharacters",
    "UnexpectedCharactersInSubtemplate",
    "UnrecognizedPlaceholderType",
    "IllegalPlaceholderInsertion",
    "IllFormedTemplate",
    "TemplateNestingTooDeep",
]
