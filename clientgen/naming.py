"""Turn HTTP methods, paths and schema keys into Python identifiers.

Method names: {method}_{path segments}, path parameters become by_{name}.

Examples:
  GET    /items                 -> get_items
  GET    /items/{id}            -> get_items_by_id
  POST   /users/{userId}/pets   -> post_users_by_user_id_pets
  DELETE /                      -> delete_root
"""

from __future__ import annotations

import builtins
import keyword
import re

# Names the generated module defines, imports or takes from builtins;
# schema classes are module-level and must not shadow them
RESERVED_TYPE_NAMES = frozenset({
    "Any",
    "ApiResponse",
    "BaseClient",
    "ClientError",
    "DecodeError",
    "Mapping",
    "PaginatedResponse",
    "SerializationError",
}) | frozenset(dir(builtins))

# Field names that break the generated dataclass body or __init__
_RESERVED_FIELD_NAMES = frozenset({"self", "dataclasses"})


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def _sanitize_segment(segment: str) -> str:
    """Sanitize a path segment for use in a Python identifier."""
    name = _camel_to_snake(segment)
    name = re.sub(r"[.\-]", "_", name)
    name = re.sub(r"[^a-z0-9_]", "", name)
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def _path_parts(path: str) -> list[str]:
    parts = []
    for segment in path.split("/"):
        if not segment:
            continue
        if segment.startswith("{") and segment.endswith("}"):
            clean = _sanitize_segment(segment[1:-1])
            if clean:
                parts.append(f"by_{clean}")
            continue
        # Braces inside a segment, e.g. /files/{name}.json
        clean = _sanitize_segment(segment.replace("{", "_by_").replace("}", "_"))
        if clean:
            parts.append(clean)
    return parts


def function_name(method: str, path: str) -> str:
    """Build the generated method name for an operation."""
    verb = _sanitize_segment(method.lower()) or "call"
    parts = _path_parts(path)
    if not parts:
        return f"{verb}_root"
    return "_".join([verb, *parts])


def type_name(key: str) -> str:
    """PascalCase class name for a schema key."""
    words = [w for w in re.split(r"[^A-Za-z0-9]+", key) if w]
    name = "".join(w[0].upper() + w[1:] for w in words)
    if not name:
        name = "Schema"
    elif name[0].isdigit():
        name = f"Schema{name}"
    if name in RESERVED_TYPE_NAMES:
        name += "Model"
    return name


def field_name(prop: str) -> str:
    """snake_case attribute name for a schema property."""
    name = _camel_to_snake(prop)
    name = re.sub(r"[^a-z0-9_]", "_", name)
    name = re.sub(r"_+", "_", name).strip("_")
    if not name:
        return "field"
    if name[0].isdigit():
        name = f"field_{name}"
    if keyword.iskeyword(name) or name in _RESERVED_FIELD_NAMES:
        name += "_"
    return name


def deduplicate(names: list[str]) -> list[str]:
    """Make names unique by appending _2, _3, ... to repeats."""
    seen: dict[str, int] = {}
    result = []
    for name in names:
        candidate = name
        while candidate in seen:
            seen[name] += 1
            candidate = f"{name}_{seen[name]}"
        seen.setdefault(candidate, 1)
        result.append(candidate)
    return result
