# src/failure_context/utils/__init__.py
from .attribute_access import (
    failure_data,
    inner_failure,
    iter_failure_chain,
    read_attribute,
    read_first_attribute,
    type_identifier,
    zero_value,
)

__all__ = [
    "read_attribute", "read_first_attribute", "zero_value",
    "type_identifier", "inner_failure", "iter_failure_chain", "failure_data",
]
