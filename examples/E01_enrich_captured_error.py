# examples/E01_enrich_captured_error.py
"""
Example: Enriching a Captured Error
-----------------------------------
This example builds a data handler registry with the default handlers,
adds a custom handler for TimeoutError, and captures an exception chain
whose inner failure carries SQL diagnostics.

To Run:
1. Ensure failure-context is installed (`poetry install --all-extras`).
2. Run from the root of the project:
   `poetry run python examples/E01_enrich_captured_error.py`
"""
import json
import logging

from failure_context import (
    Command,
    DataHandlerSettings,
    ErrorRecord,
    build_registry,
    configure_logging,
    sql_exception_handler,
)


class FakeSqlError(Exception):
    """Stands in for a database driver exception."""
    def __init__(self, message: str):
        super().__init__(message)
        self.data = {"SQL": "SELECT * FROM Posts WHERE Id = @id"}
        self.Server = "ny-sql01"
        self.Number = 207
        self.LineNumber = 1
        self.Procedure = ""


def main():
    configure_logging("DEBUG")
    registry = build_registry(DataHandlerSettings(isolate_handler_errors=True))
    registry.register(f"{__name__}.FakeSqlError", sql_exception_handler)

    @registry.handles(TimeoutError)
    def on_timeout(record: ErrorRecord, failure: TimeoutError) -> None:
        record.add_command(Command("Timeout")).add_data("Message", str(failure))

    try:
        try:
            raise FakeSqlError("Invalid column name 'Idd'.")
        except FakeSqlError as e:
            raise TimeoutError("Request timed out") from e
    except TimeoutError as outer:
        record = ErrorRecord.from_exception(outer, registry=registry)

    print(json.dumps(record.to_dict(), indent=2))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
