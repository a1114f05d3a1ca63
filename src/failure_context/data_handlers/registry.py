# src/failure_context/data_handlers/registry.py
"""
DataHandlerRegistry: maps exception type identifiers to data handlers and
dispatches them over an ErrorRecord's causal chain.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Type, Union

from failure_context.core.types import ErrorRecord
from failure_context.utils.attribute_access import iter_failure_chain, type_identifier

from .abc import DataHandler

logger = logging.getLogger(__name__)


class HandlerEntry:
    """
    A registered handler and the rule deciding which failures it fires for.

    String-keyed entries match on exact type identifier. Typed entries match
    any instance of the registered class, subclasses included.
    """

    def __init__(self, type_name: str, handler: DataHandler, exception_type: Optional[Type[BaseException]] = None):
        self.type_name = type_name
        self.handler = handler
        self.exception_type = exception_type

    def matches(self, failure: Any) -> bool:
        if self.exception_type is not None:
            return isinstance(failure, self.exception_type)
        return type_identifier(failure) == self.type_name

    def __repr__(self) -> str:
        kind = "typed" if self.exception_type is not None else "named"
        return f"HandlerEntry({self.type_name!r}, {kind})"


class DataHandlerRegistry:
    """
    Registry of data handlers keyed by exception type identifier.

    Populate it once at startup, then hand it to the capture pipeline, which
    calls `dispatch` for each captured error. There is no locking; concurrent
    registration and dispatch must be serialized by the caller.

    Dispatch does not deduplicate: a handler fires once for every matching
    failure in the chain, so two same-typed exceptions in one chain produce
    two commands.
    """

    def __init__(self, isolate_handler_errors: bool = False):
        self._entries: Dict[str, HandlerEntry] = {}
        self.isolate_handler_errors = isolate_handler_errors
        logger.debug(f"DataHandlerRegistry initialized. Isolate handler errors: {isolate_handler_errors}")

    def register(self, type_name: str, handler: DataHandler) -> "DataHandlerRegistry":
        """
        Registers `handler` for failures whose type identifier equals `type_name`
        exactly (e.g. "pymssql._mssql.MSSQLDatabaseException"). Replaces any
        handler already registered under that name.
        """
        self._store(HandlerEntry(type_name, handler))
        return self

    def register_typed(self, exception_type: Type[BaseException], handler: DataHandler) -> "DataHandlerRegistry":
        """
        Registers `handler` for instances of `exception_type` and its
        subclasses, keyed by the class's fully-qualified name.
        """
        if not isinstance(exception_type, type) or not issubclass(exception_type, BaseException):
            raise TypeError(f"register_typed expects an exception class, got {exception_type!r}.")
        self._store(HandlerEntry(type_identifier(exception_type), handler, exception_type=exception_type))
        return self

    def handles(self, target: Union[str, Type[BaseException]]) -> Callable[[DataHandler], DataHandler]:
        """
        Decorator form of `register` / `register_typed`:

            @registry.handles(TimeoutError)
            def on_timeout(record, failure): ...
        """
        def decorator(handler: DataHandler) -> DataHandler:
            if isinstance(target, str):
                self.register(target, handler)
            else:
                self.register_typed(target, handler)
            return handler
        return decorator

    def unregister(self, type_name: str) -> bool:
        removed = self._entries.pop(type_name, None)
        if removed is not None:
            logger.debug(f"Unregistered data handler for '{type_name}'.")
        return removed is not None

    def add_defaults(
        self,
        sql_exception_types: Optional[List[str]] = None,
        redis_exception_types: Optional[List[str]] = None,
    ) -> "DataHandlerRegistry":
        """Registers the built-in SQL Server and Redis handlers and returns this registry."""
        from .defaults import add_default_handlers

        add_default_handlers(self, sql_exception_types, redis_exception_types)
        return self

    def dispatch(self, record: ErrorRecord) -> None:
        """
        Walks the record's causal chain, outermost first, and calls every
        handler whose registration matches each failure.

        Handler exceptions propagate unless the registry was created with
        `isolate_handler_errors=True`, in which case they are logged and
        dispatch moves on to the next handler.
        """
        if record is None or record.exception is None or not self._entries:
            return
        entries = list(self._entries.values())
        for failure in iter_failure_chain(record.exception):
            for entry in entries:
                if not entry.matches(failure):
                    continue
                if not self.isolate_handler_errors:
                    entry.handler(record, failure)
                    continue
                try:
                    entry.handler(record, failure)
                except Exception as e:
                    logger.error(
                        f"Data handler for '{entry.type_name}' failed on {type_identifier(failure)}: {e}",
                        exc_info=True,
                    )

    def type_names(self) -> List[str]:
        return list(self._entries.keys())

    def get(self, type_name: str) -> Optional[HandlerEntry]:
        return self._entries.get(type_name)

    def _store(self, entry: HandlerEntry) -> None:
        if entry.type_name in self._entries:
            logger.debug(f"Replacing data handler for '{entry.type_name}'.")
        else:
            logger.debug(f"Registered data handler for '{entry.type_name}'.")
        self._entries[entry.type_name] = entry

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def register_handler(registry: Optional[DataHandlerRegistry], type_name: str, handler: DataHandler) -> None:
    """String-keyed registration; a no-op when `registry` is None."""
    if registry is None:
        return
    registry.register(type_name, handler)


def register_typed_handler(
    registry: Optional[DataHandlerRegistry], exception_type: Type[BaseException], handler: DataHandler
) -> None:
    """Typed registration; a no-op when `registry` is None."""
    if registry is None:
        return
    registry.register_typed(exception_type, handler)


def dispatch(registry: Optional[DataHandlerRegistry], record: ErrorRecord) -> None:
    """Runs `registry`'s handlers over `record`; a no-op when `registry` is None."""
    if registry is None:
        return
    registry.dispatch(record)
