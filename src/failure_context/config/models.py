# src/failure_context/config/models.py
import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from failure_context.data_handlers.defaults import (
    DEFAULT_REDIS_EXCEPTION_TYPES,
    DEFAULT_SQL_EXCEPTION_TYPES,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class DataHandlerSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    register_defaults: bool = Field(
        default=True,
        description="If True (default), the built-in SQL Server and Redis handlers are registered."
    )
    sql_exception_types: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SQL_EXCEPTION_TYPES),
        description="Type identifiers routed to the SQL Server handler. All of them share one handler function."
    )
    redis_exception_types: List[str] = Field(
        default_factory=lambda: list(DEFAULT_REDIS_EXCEPTION_TYPES),
        description="Type identifiers routed to the Redis handler."
    )
    isolate_handler_errors: bool = Field(
        default=False,
        description=(
            "If False (default), an exception raised inside a data handler propagates out of dispatch. "
            "If True, it is logged with its traceback and dispatch continues with the remaining handlers, "
            "so a faulty handler cannot prevent the error record from being stored."
        )
    )
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Expected one of {_LOG_LEVELS}.")
        return level
