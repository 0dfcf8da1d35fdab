"""Generic object <-> JSON conversion.

``get_json`` renders any JSON-compatible value, or a Pydantic model, as
compact JSON. ``from_json`` goes the other way and attaches the parsed
fields to a target type without validating them, so the returned object
carries the type's behaviour (methods, properties) over whatever data the
JSON held.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    Examples:
        ``[1, 2, 3]`` -> ``'[1,2,3]'``
        ``Rectangle(width=10, height=20)`` -> ``'{"width":10,"height":20}'``
        ``Circle(10)`` -> ``'{"radius":10}'`` (instance attributes)
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(proto: type[T], content: str) -> T:
    """Build an instance of ``proto`` from a JSON object string.

    Pydantic models go through ``model_construct`` (no validation); keys the
    model does not declare are kept only when its config has
    ``extra="allow"``. Any other class gets a bare instance with the parsed
    fields set as attributes.

    Raises:
        ValueError: If ``content`` is not JSON or does not hold a JSON object.
    """
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    if isinstance(proto, type) and issubclass(proto, BaseModel):
        return proto.model_construct(**data)

    obj = proto.__new__(proto)
    obj.__dict__.update(data)
    return obj
