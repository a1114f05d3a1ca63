# src/failure_context/data_handlers/impl/sql_handler.py
"""Data handler for SQL Server client exceptions (pymssql and friends)."""
import logging
from typing import Any

from failure_context.core.types import Command, ErrorRecord
from failure_context.utils.attribute_access import failure_data, read_first_attribute

logger = logging.getLogger(__name__)

SQL_COMMAND_NAME = "SQL Server Query"
SQL_DATA_KEY = "SQL"

# Attribute spellings tried in order; .NET-style names first, then the names
# pymssql's MSSQLDatabaseException actually exposes.
SERVER_ATTRIBUTES = ("Server", "server", "srvname")
NUMBER_ATTRIBUTES = ("Number", "number")
LINE_NUMBER_ATTRIBUTES = ("LineNumber", "line_number", "line")
PROCEDURE_ATTRIBUTES = ("Procedure", "procedure", "procname")


def sql_exception_handler(record: ErrorRecord, failure: Any) -> None:
    """
    Attaches a "SQL Server Query" command carrying the failing query (from the
    exception's `data["SQL"]`) and the server, error number, line number and,
    when known, the stored procedure.
    """
    query = failure_data(failure).get(SQL_DATA_KEY)
    procedure = read_first_attribute(failure, PROCEDURE_ATTRIBUTES, str)
    command = Command(SQL_COMMAND_NAME, query if isinstance(query, str) else None)
    command.add_data("Server", read_first_attribute(failure, SERVER_ATTRIBUTES, str)) \
        .add_data("Number", str(read_first_attribute(failure, NUMBER_ATTRIBUTES, int))) \
        .add_data("LineNumber", str(read_first_attribute(failure, LINE_NUMBER_ATTRIBUTES, int))) \
        .add_data_if(bool(procedure), "Procedure", procedure)
    record.add_command(command)
    logger.debug(f"Attached '{SQL_COMMAND_NAME}' command for {record.type_name}.")
