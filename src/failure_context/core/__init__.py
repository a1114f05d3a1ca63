"""Core types shared by handlers and the dispatcher."""
from .types import Command, DataHandlerFunction, ErrorRecord

__all__ = ["Command", "ErrorRecord", "DataHandlerFunction"]
