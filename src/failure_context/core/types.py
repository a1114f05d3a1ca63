# src/failure_context/core/types.py
"""Core shared types: the Command diagnostic payload and the ErrorRecord it is attached to."""
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from failure_context.utils.attribute_access import type_identifier

if TYPE_CHECKING:
    from failure_context.data_handlers.registry import DataHandlerRegistry

logger = logging.getLogger(__name__)


class Command(BaseModel):
    """
    One structured diagnostic unit attached to an ErrorRecord, e.g. the SQL
    query that failed or the cache command that was running.

    `data` preserves insertion order; writing an existing key overwrites it.
    """
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(description="Human-readable label, e.g. 'SQL Server Query'.")
    command_string: Optional[str] = Field(default=None, description="Free-form command text, e.g. the failing query.")
    data: Dict[str, Optional[str]] = Field(default_factory=dict)

    def __init__(self, name: str, command_string: Optional[str] = None, **kwargs: Any):
        super().__init__(name=name, command_string=command_string, **kwargs)

    def add_data(self, key: str, value: Any) -> "Command":
        """Sets `key`; values other than None are stored as their str() form."""
        self.data[key] = None if value is None else str(value)
        return self

    def add_data_if(self, predicate: bool, key: str, value: Any) -> "Command":
        if predicate:
            self.add_data(key, value)
        return self


class ErrorRecord:
    """
    A captured error: the root exception plus the commands handlers attached to it.

    Persistence and rendering belong to the capture pipeline; this type only
    holds what dispatch needs and a plain-dict view for whoever consumes it.
    """

    def __init__(self, exception: Optional[BaseException], message: Optional[str] = None):
        self.exception = exception
        self.type_name: Optional[str] = type_identifier(exception) if exception is not None else None
        self.message: str = message if message is not None else (str(exception) if exception is not None else "")
        self.creation_date = datetime.now(timezone.utc)
        self.commands: List[Command] = []

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        registry: Optional["DataHandlerRegistry"] = None,
        message: Optional[str] = None,
    ) -> "ErrorRecord":
        """Builds a record for `exception` and runs the registry's handlers over it, if one is given."""
        record = cls(exception, message=message)
        if registry is not None:
            registry.dispatch(record)
        return record

    def add_command(self, command: Command) -> Command:
        self.commands.append(command)
        return command

    def get_commands(self, name: str) -> List[Command]:
        return [c for c in self.commands if c.name == name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type_name,
            "message": self.message,
            "creation_date": self.creation_date.isoformat(),
            "commands": [c.model_dump() for c in self.commands],
        }

    def __repr__(self) -> str:
        return f"ErrorRecord(type={self.type_name!r}, commands={len(self.commands)})"


# A handler inspects one failure in the chain and appends zero or more commands.
DataHandlerFunction = Callable[[ErrorRecord, Any], None]
