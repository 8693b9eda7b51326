"""Map document schemas to Python type annotations.

The mapping is total: unknown kinds, missing schemas and anything the
generator chooses not to expand fall back to ANY.

Handles:
- primitives (string, integer, boolean)
- objects, always flattened to ANY_MAP without looking at properties
- arrays, whose element type goes through the scalar-only mapping, so an
  array of objects is list[Any], not list[dict[str, Any]]
"""

from __future__ import annotations

from .model import Schema

ANY = "Any"
ANY_MAP = "dict[str, Any]"

_SCALAR_TYPES: dict[str, str] = {
    "string": "str",
    "integer": "int",
    "boolean": "bool",
}


def map_scalar_type(schema: Schema | None) -> str:
    """Element mapping for arrays: primitives only, everything else is ANY."""
    if schema is None:
        return ANY
    return _SCALAR_TYPES.get(schema.kind or "", ANY)


def map_type(schema: Schema | None) -> str:
    """Return the Python annotation for a schema."""
    if schema is None:
        return ANY
    if schema.kind == "object":
        return ANY_MAP
    if schema.kind == "array":
        return f"list[{map_scalar_type(schema.items)}]"
    return map_scalar_type(schema)


def optional(annotation: str) -> str:
    """Annotation for a field that defaults to None."""
    if annotation == ANY:
        return ANY
    return f"{annotation} | None"
