# src/failure_context/utils/attribute_access.py
"""
Dynamic, failure-tolerant access to exception objects of unknown shape.

Handlers use these helpers to pull fields off third-party exceptions without
importing the library that defines them.
"""
import logging
from collections.abc import Mapping
from typing import Any, Iterator, Optional, Sequence, Tuple, Type, Union

logger = logging.getLogger(__name__)

_ZERO = object()

ExpectedType = Union[Type[Any], Tuple[Type[Any], ...]]


def zero_value(expected_type: ExpectedType) -> Any:
    """
    Returns the zero value for a type: `expected_type()` if it can be built
    without arguments (0, "", 0.0, False, ...), otherwise None.
    """
    if isinstance(expected_type, tuple):
        return None
    try:
        return expected_type()
    except Exception:
        return None


def _accepts_bool(expected_type: ExpectedType) -> bool:
    """bool subclasses int; only let it through where bool itself is asked for."""
    types = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    return not any(t in (int, float, complex) for t in types) or bool in types


def read_attribute(obj: Any, name: str, expected_type: ExpectedType, default: Any = _ZERO) -> Any:
    """
    Reads attribute `name` from `obj` and returns it if it is an instance of
    `expected_type`.

    Never raises. A missing attribute, a getter that raises, or a value of
    the wrong type all resolve to `default` (the zero value of
    `expected_type` when no default is given).
    """
    fallback = zero_value(expected_type) if default is _ZERO else default
    if obj is None or not name:
        return fallback
    try:
        value = getattr(obj, name)
    except Exception:
        return fallback
    if value is None or not isinstance(value, expected_type):
        return fallback
    if isinstance(value, bool) and not _accepts_bool(expected_type):
        return fallback
    return value


def read_first_attribute(obj: Any, names: Sequence[str], expected_type: ExpectedType, default: Any = _ZERO) -> Any:
    """Like read_attribute, trying each spelling in `names` until one yields a usable value."""
    for name in names:
        value = read_attribute(obj, name, expected_type, default=None)
        if value is not None:
            return value
    return zero_value(expected_type) if default is _ZERO else default


def type_identifier(obj: Any) -> str:
    """Fully-qualified name of the object's runtime type, e.g. 'builtins.ValueError'."""
    obj_type = obj if isinstance(obj, type) else type(obj)
    return f"{obj_type.__module__}.{obj_type.__qualname__}"


def inner_failure(failure: Any) -> Optional[Any]:
    """
    The causal predecessor of `failure`: the explicit `__cause__` if set,
    otherwise the implicit `__context__` unless it was suppressed.
    """
    cause = read_attribute(failure, "__cause__", object, default=None)
    if cause is not None:
        return cause
    if read_attribute(failure, "__suppress_context__", bool, default=False):
        return None
    return read_attribute(failure, "__context__", object, default=None)


def iter_failure_chain(failure: Any) -> Iterator[Any]:
    """Yields `failure` and then each inner failure, outermost first."""
    current = failure
    while current is not None:
        yield current
        current = inner_failure(current)


def failure_data(failure: Any) -> Mapping:
    """The ad-hoc key/value diagnostic bag attached to a failure (its `data` mapping), or {}."""
    return read_attribute(failure, "data", Mapping, default={})
