"""JSON helpers that move objects to and from their JSON representation."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from objtasks.exceptions import SerializationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    """Fallback for objects the json module does not know how to encode."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if hasattr(value, "__dict__"):
        # Own data attributes, like JSON.stringify on a plain object
        return {k: v for k, v in vars(value).items() if not callable(v)}
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def get_json(value: Any) -> str:
    """Return the compact JSON representation of ``value``.

    Keys keep their insertion order and no whitespace is emitted, e.g.
    ``get_json([1, 2, 3]) == "[1,2,3]"``.
    """
    return json.dumps(value, separators=(",", ":"), default=_to_jsonable)


def _fields(shape: type, data: Any) -> dict[str, Any]:
    """Return the fields a decoded payload contributes to a new object."""
    if isinstance(data, dict):
        return data
    # null, numbers and booleans carry no fields of their own
    if data is None or isinstance(data, (bool, int, float)):
        return {}
    logger.warning("from_json_rejected", shape=shape.__name__, payload_type=type(data).__name__)
    msg = f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
    raise SerializationError(msg)


def from_json(shape: type[T], payload: str) -> T:
    """Build an object of type ``shape`` from a JSON object string.

    Pydantic models are validated through ``model_validate``. Any other class
    is allocated without calling ``__init__`` and the parsed fields are set on
    the instance, so the class supplies behaviour and the JSON supplies data.

    Raises:
        json.JSONDecodeError: ``payload`` is not valid JSON.
        SerializationError: ``payload`` decodes to an array or a string.
    """
    data = _fields(shape, json.loads(payload))

    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape.model_validate(data)

    instance = shape.__new__(shape)
    for key, value in data.items():
        setattr(instance, key, value)
    return instance
