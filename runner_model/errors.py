"""Reduction of arbitrary error values to JSON-safe data."""

import math
import traceback
from collections.abc import Mapping
from enum import Enum
from types import ModuleType
from typing import Any, TypedDict


class SerializedError(TypedDict):
    """Serialized form of a raised exception."""

    message: str
    stack: str


def serialize_error(error: object) -> SerializedError | Any:
    """Convert an error value into something ``json.dumps`` accepts.

    Exceptions become ``{"message", "stack"}``. Any other value is deep-copied
    with cycles broken, see :func:`trim_cycles`.
    """
    if isinstance(error, BaseException):
        return {
            "message": str(error),
            "stack": "".join(traceback.format_exception(error)).rstrip(),
        }
    return trim_cycles(error)


def trim_cycles(value: object) -> Any:
    """Return an acyclic, JSON-safe copy of ``value``.

    A mutable container or object reached a second time during the same pass is
    replaced by its string form instead of being walked again. This is lossy:
    shared references are flattened too, not only cycles.
    """
    return _trim(value, set())


def _trim(value: object, seen: set[int]) -> Any:
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode(errors="replace")
    if isinstance(value, Enum):
        return _trim(value.value, seen)
    if isinstance(value, type | ModuleType) or callable(value):
        return str(value)
    # Tuples and frozensets are not tracked; equal constants may share one object.
    if isinstance(value, tuple | frozenset):
        return [_trim(item, seen) for item in value]

    if id(value) in seen:
        return str(value)
    seen.add(id(value))

    if isinstance(value, BaseException):
        return serialize_error(value)
    if isinstance(value, Mapping):
        return {str(key): _trim(item, seen) for key, item in value.items()}
    if isinstance(value, list | set):
        return [_trim(item, seen) for item in value]
    if hasattr(value, "__dict__"):
        return {
            key: _trim(item, seen)
            for key, item in vars(value).items()
            if not key.startswith("_")
        }
    return str(value)
