# src/failure_context/data_handlers/defaults.py
"""Registration of the built-in data handlers."""
import logging
from typing import List, Optional

from .impl import redis_exception_handler, sql_exception_handler
from .registry import DataHandlerRegistry

logger = logging.getLogger(__name__)

# Older pymssql shipped _mssql as a top-level module; newer releases nest it.
DEFAULT_SQL_EXCEPTION_TYPES: List[str] = [
    "pymssql._mssql.MSSQLDatabaseException",
    "_mssql.MSSQLDatabaseException",
]
# String keys match exactly, so the concrete types redis-py raises are listed
# alongside the base class.
DEFAULT_REDIS_EXCEPTION_TYPES: List[str] = [
    "redis.exceptions.RedisError",
    "redis.exceptions.ConnectionError",
    "redis.exceptions.TimeoutError",
    "redis.exceptions.ResponseError",
    "redis.exceptions.BusyLoadingError",
    "redis.exceptions.DataError",
    "redis.exceptions.AuthenticationError",
    "redis.exceptions.ReadOnlyError",
    "redis.exceptions.NoScriptError",
    "redis.exceptions.ExecAbortError",
    "redis.exceptions.WatchError",
]


def add_default_handlers(
    registry: Optional[DataHandlerRegistry],
    sql_exception_types: Optional[List[str]] = None,
    redis_exception_types: Optional[List[str]] = None,
) -> Optional[DataHandlerRegistry]:
    """
    Registers the SQL Server and Redis handlers on `registry` and returns it.
    Every SQL identifier maps to the same handler function. A None registry
    is returned untouched.
    """
    if registry is None:
        return None
    sql_types = DEFAULT_SQL_EXCEPTION_TYPES if sql_exception_types is None else sql_exception_types
    redis_types = DEFAULT_REDIS_EXCEPTION_TYPES if redis_exception_types is None else redis_exception_types
    for type_name in sql_types:
        registry.register(type_name, sql_exception_handler)
    for type_name in redis_types:
        registry.register(type_name, redis_exception_handler)
    logger.debug(f"Default data handlers registered for: {sql_types + redis_types}")
    return registry
