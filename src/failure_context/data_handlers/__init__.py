"""Data handler registry, dispatcher and built-in handlers."""

from .abc import DataHandler
from .defaults import (
    DEFAULT_REDIS_EXCEPTION_TYPES,
    DEFAULT_SQL_EXCEPTION_TYPES,
    add_default_handlers,
)
from .impl import redis_exception_handler, sql_exception_handler
from .registry import (
    DataHandlerRegistry,
    HandlerEntry,
    dispatch,
    register_handler,
    register_typed_handler,
)

__all__ = [
    "DataHandler",
    "DataHandlerRegistry",
    "HandlerEntry",
    "register_handler",
    "register_typed_handler",
    "dispatch",
    "add_default_handlers",
    "sql_exception_handler",
    "redis_exception_handler",
    "DEFAULT_SQL_EXCEPTION_TYPES",
    "DEFAULT_REDIS_EXCEPTION_TYPES",
]
