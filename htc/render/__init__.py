from .dialects import (
    DEFAULT_DIALECT,
    DIALECTS,
    CoffeeScriptDialect,
    Dialect,
    JavaScriptDialect,
    UnknownDialectError,
    get_dialect,
)
from .emitter import CodeEmitter

__all__ = [
    "CodeEmitter",
    "Dialect",
    "CoffeeScriptDialect",
    "JavaScriptDialect",
    "UnknownDialectError",
    "DIALECTS",
    "DEFAULT_DIALECT",
    "get_dialect",
]
