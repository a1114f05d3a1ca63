"""Pytest fixtures and global test configuration for failure-context."""
from typing import Any, Dict, Optional

import pytest

from failure_context.data_handlers.registry import DataHandlerRegistry


class FakeSqlException(Exception):
    """Shaped like a SQL Server client exception: a data bag plus named attributes."""

    def __init__(
        self,
        message: str = "Invalid column name.",
        data: Optional[Dict[str, Any]] = None,
        **attributes: Any,
    ):
        super().__init__(message)
        self.data = data if data is not None else {}
        for name, value in attributes.items():
            setattr(self, name, value)


class FakeCacheException(Exception):
    """Shaped like a Redis client exception carrying command details in its data bag."""

    def __init__(self, message: str = "Timeout performing GET.", data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.data = data if data is not None else {}


@pytest.fixture()
def registry() -> DataHandlerRegistry:
    return DataHandlerRegistry()


@pytest.fixture()
def sql_exception() -> FakeSqlException:
    return FakeSqlException(
        data={"SQL": "SELECT 1"},
        Server="db1",
        Number=207,
        LineNumber=12,
        Procedure="",
    )


@pytest.fixture()
def cache_exception() -> FakeCacheException:
    return FakeCacheException(
        data={"redis-command": "GET foo", "Redis-Host": "node1", "other": "ignored"}
    )


@pytest.fixture()
def chained_exception() -> ValueError:
    """A ValueError raised from a KeyError, i.e. a two-node causal chain."""
    try:
        try:
            raise KeyError("missing")
        except KeyError as inner:
            raise ValueError("outer") from inner
    except ValueError as outer:
        return outer


@pytest.fixture()
def sql_exception_cls() -> type:
    return FakeSqlException


@pytest.fixture()
def cache_exception_cls() -> type:
    return FakeCacheException
