### src/failure_context/__init__.py
"""
failure-context
-----------------------------

Enriches captured error records with structured diagnostic commands
extracted from the exception and its causal chain, using handlers
registered per exception type.
"""
__version__ = "0.1.0"

from .config.logging_setup import configure_logging
from .config.models import DataHandlerSettings
from .config.resolver import build_registry
from .core.types import Command, DataHandlerFunction, ErrorRecord
from .data_handlers.abc import DataHandler
from .data_handlers.defaults import add_default_handlers
from .data_handlers.impl import redis_exception_handler, sql_exception_handler
from .data_handlers.registry import (
    DataHandlerRegistry,
    HandlerEntry,
    dispatch,
    register_handler,
    register_typed_handler,
)
from .utils.attribute_access import (
    failure_data,
    iter_failure_chain,
    read_attribute,
    read_first_attribute,
    type_identifier,
)

__all__ = [
    "__version__",
    "Command",
    "ErrorRecord",
    "DataHandler",
    "DataHandlerFunction",
    "DataHandlerRegistry",
    "HandlerEntry",
    "register_handler",
    "register_typed_handler",
    "dispatch",
    "add_default_handlers",
    "sql_exception_handler",
    "redis_exception_handler",
    "DataHandlerSettings",
    "build_registry",
    "configure_logging",
    "read_attribute",
    "read_first_attribute",
    "type_identifier",
    "iter_failure_chain",
    "failure_data",
]
