# src/failure_context/config/resolver.py
import logging
from typing import Optional

from failure_context.data_handlers.defaults import add_default_handlers
from failure_context.data_handlers.registry import DataHandlerRegistry

from .logging_setup import configure_logging
from .models import DataHandlerSettings

logger = logging.getLogger(__name__)


def build_registry(settings: Optional[DataHandlerSettings] = None) -> DataHandlerRegistry:
    """
    Resolves settings into a registry ready to hand to the capture pipeline.
    Callers add their own handlers to the returned registry before first use.
    """
    resolved = settings or DataHandlerSettings()
    configure_logging(resolved.log_level, add_console_handler=False)
    registry = DataHandlerRegistry(isolate_handler_errors=resolved.isolate_handler_errors)
    if resolved.register_defaults:
        add_default_handlers(
            registry,
            sql_exception_types=resolved.sql_exception_types,
            redis_exception_types=resolved.redis_exception_types,
        )
    logger.info(f"Data handler registry built with {len(registry)} handler(s).")
    return registry
