"""
Отслеживание HTML-контекста.

Контекст — строка-остаток "незакрытой" разметки: открытые теги,
открытые атрибуты, открытые значения в кавычках. Пустая строка означает
верхний уровень (вне любого тега).

Это не HTML-парсер. Новый контекст получается сокращением строки
"старый контекст + литерал" тремя подстановками; всё, что осталось,
считается ещё открытым. Вложенность элементов не отслеживается:
законченный тег вида <div> стирается целиком.
Самозакрывающиеся теги (<br/>, <img src='' />) и тег с пробелом
перед > (<div >) тоже считаются законченными. Значения атрибутов без
кавычек не поддерживаются: <input value=x> остаётся открытым.
"""

from __future__ import annotations

import re

TOP_LEVEL = ""

# значения открытых атрибутов в кавычках (символы '"<> внутри не допускаются)
_QUOTED_VALUE = re.compile(r"""(=['"])[^'"<>]*""", re.ASCII)
# закрытые атрибуты тега: голые (перед пробелом, / или >), ='' или =""
_CLOSED_ATTRIBUTES = re.compile(r"""(<\w+)( [\w-]+((?=[ />])|=''|=""))*""", re.ASCII)
# ведущий текст (без '"<>) и законченные теги, включая <br/>, <img /> и <div >
_LEADING_TEXT_AND_TAGS = re.compile(r"""^([^'"<>]+|</?\w+ ?/?>)*""", re.ASCII)

_IN_QUOTED_ATTRIBUTE = re.compile(r"""=['"]$""")


def advance_context(context: str, literal: str) -> str:
    """
    Вычисляет контекст после потреблённого литерала.

    Args:
        context: Контекст до литерала
        literal: Уже разэкранированный текст литерала

    Returns:
        Остаток незакрытой структуры
    """
    text = context + literal
    text = _QUOTED_VALUE.sub(r"\1", text)
    text = _CLOSED_ATTRIBUTES.sub(r"\1", text)
    text = _LEADING_TEXT_AND_TAGS.sub("", text, count=1)
    return text


def is_top_level(context: str) -> bool:
    return context == TOP_LEVEL


def in_quoted_attribute(context: str) -> bool:
    """Точка вставки находится внутри открытого значения атрибута в кавычках."""
    return bool(_IN_QUOTED_ATTRIBUTE.search(context))


__all__ = ["TOP_LEVEL", "advance_context", "is_top_level", "in_quoted_attribute"]
