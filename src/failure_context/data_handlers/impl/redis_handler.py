# src/failure_context/data_handlers/impl/redis_handler.py
"""Data handler for Redis client exceptions that carry command details in their data bag."""
import logging
from typing import Any

from failure_context.core.types import Command, ErrorRecord
from failure_context.utils.attribute_access import failure_data

logger = logging.getLogger(__name__)

REDIS_COMMAND_NAME = "Redis"
REDIS_COMMAND_KEY = "redis-command"
REDIS_FIELD_PREFIX = "Redis-"


def redis_exception_handler(record: ErrorRecord, failure: Any) -> None:
    """
    Attaches a "Redis" command. The `redis-command` entry becomes the command
    text; every `Redis-<Field>` entry becomes a `<Field>` data field.
    Other entries are ignored.
    """
    command = record.add_command(Command(REDIS_COMMAND_NAME))
    for key, value in failure_data(failure).items():
        if not isinstance(key, str):
            continue
        text = value if isinstance(value, str) else None
        if key == REDIS_COMMAND_KEY:
            command.command_string = text
        if key.startswith(REDIS_FIELD_PREFIX):
            command.add_data(key[len(REDIS_FIELD_PREFIX):], text)
    logger.debug(f"Attached '{REDIS_COMMAND_NAME}' command with {len(command.data)} field(s) for {record.type_name}.")
