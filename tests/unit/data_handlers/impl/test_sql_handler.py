"""Unit tests for the SQL Server data handler."""
import pytest

from failure_context.core.types import ErrorRecord
from failure_context.data_handlers.impl.sql_handler import SQL_COMMAND_NAME, sql_exception_handler


def test_sql_handler_scenario(sql_exception):
    record = ErrorRecord(sql_exception)
    sql_exception_handler(record, sql_exception)

    assert len(record.commands) == 1
    cmd = record.commands[0]
    assert cmd.name == "SQL Server Query"
    assert cmd.command_string == "SELECT 1"
    assert cmd.data == {"Server": "db1", "Number": "207", "LineNumber": "12"}
    assert list(cmd.data.keys()) == ["Server", "Number", "LineNumber"]

def test_sql_handler_includes_procedure_when_present(sql_exception_cls):
    exc = sql_exception_cls(data={}, Server="db1", Number=50000, LineNumber=3, Procedure="usp_GetPosts")
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].data["Procedure"] == "usp_GetPosts"
    assert record.commands[0].command_string is None

def test_sql_handler_missing_attributes_degrade_to_zero_values(sql_exception_cls):
    exc = sql_exception_cls()
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].data == {"Server": "", "Number": "0", "LineNumber": "0"}

def test_sql_handler_ignores_non_string_query(sql_exception_cls):
    exc = sql_exception_cls(data={"SQL": 42})
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].command_string is None

def test_sql_handler_reads_pymssql_attribute_names(sql_exception_cls):
    exc = sql_exception_cls(
        data={"SQL": "EXEC usp_Broken"},
        srvname="mssql-prod",
        number=2812,
        line=1,
        procname="usp_Broken",
    )
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].data == {
        "Server": "mssql-prod",
        "Number": "2812",
        "LineNumber": "1",
        "Procedure": "usp_Broken",
    }

@pytest.mark.parametrize("number", ["207", None, 2.5])
def test_sql_handler_wrong_typed_number_is_zero(sql_exception_cls, number):
    exc = sql_exception_cls(Number=number)
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].data["Number"] == "0"

def test_sql_command_name_constant():
    assert SQL_COMMAND_NAME == "SQL Server Query"

def test_sql_handler_bool_number_is_zero(sql_exception_cls):
    exc = sql_exception_cls(Number=True, LineNumber=False)
    record = ErrorRecord(exc)
    sql_exception_handler(record, exc)
    assert record.commands[0].data["Number"] == "0"
    assert record.commands[0].data["LineNumber"] == "0"
