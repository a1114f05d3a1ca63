# src/failure_context/data_handlers/impl/__init__.py
"""Built-in data handler implementations."""
from .redis_handler import redis_exception_handler
from .sql_handler import sql_exception_handler

__all__ = ["sql_exception_handler", "redis_exception_handler"]
