"""Protocol for data handlers: callables that turn one failure into diagnostic commands."""
import logging
from typing import Any, Protocol, runtime_checkable

from failure_context.core.types import ErrorRecord

logger = logging.getLogger(__name__)

@runtime_checkable
class DataHandler(Protocol):
    """
    Protocol for a data handler.

    Any callable with this signature qualifies; plain functions are the
    common case.
    """

    def __call__(self, record: ErrorRecord, failure: Any) -> None:
        """
        Inspects `failure` and appends zero or more Commands to `record`.
        Args:
            record: The ErrorRecord being enriched.
            failure: The exception in the record's causal chain that matched
                     this handler's registration. Typed as Any because handlers
                     are often registered for types that cannot be imported.
        This method is synchronous; dispatch happens inline during capture.
        """
        ...
