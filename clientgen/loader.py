"""Load an OpenAPI description and convert it into the document model.

Reads JSON or YAML, resolves $ref pointers and extracts paths, operations
and component schemas. The description is not validated: anything the
model cannot express degrades to an untyped Schema.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecLoadError
from .model import Document, Operation, Parameter, PathItem, Schema

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")

_SCHEMA_REF_PREFIX = "#/components/schemas/"


def load_spec(path: Path) -> dict[str, Any]:
    """Load an OpenAPI description from a JSON or YAML file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"failed to read API description {path}: {exc}") from exc

    try:
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            spec = yaml.safe_load(text)
        else:
            spec = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"failed to parse API description {path}: {exc}") from exc

    if not isinstance(spec, dict):
        raise SpecLoadError(f"API description {path} is not a mapping")
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return (spec.get("components") or {}).get("schemas") or {}


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer in the spec."""
    if not ref.startswith("#/"):
        raise KeyError(f"only local references are supported: {ref}")
    node: Any = spec
    for part in ref[2:].split("/"):
        node = node[part.replace("~1", "/").replace("~0", "~")]
    return node


def _schema_kind(node: dict[str, Any]) -> str | None:
    kind = node.get("type")
    if isinstance(kind, list):
        # OpenAPI 3.1: ["string", "null"]
        kind = next((k for k in kind if k != "null"), None)
    if kind is None and "properties" in node:
        return "object"
    return kind if isinstance(kind, str) else None


def _build_schema(
    spec: dict[str, Any],
    node: Any,
    resolving: frozenset[str] = frozenset(),
) -> Schema:
    if not isinstance(node, dict):
        return Schema()

    ref = node.get("$ref")
    if ref:
        if ref in resolving:
            logger.debug("Cyclic reference %s flattened to Any", ref)
            return Schema()
        try:
            target = resolve_ref(spec, ref)
        except (KeyError, IndexError, TypeError):
            logger.warning("Unresolvable reference %s flattened to Any", ref)
            return Schema()
        return _build_schema(spec, target, resolving | {ref})

    properties: dict[str, Schema] = {}
    if "allOf" in node:
        for sub in node["allOf"]:
            merged = _build_schema(spec, sub, resolving)
            properties.update(merged.properties)

    for prop_name, prop_schema in (node.get("properties") or {}).items():
        properties[prop_name] = _build_schema(spec, prop_schema, resolving)

    items = node.get("items")
    kind = _schema_kind(node)
    if kind is None and "allOf" in node:
        kind = "object"

    return Schema(
        kind=kind,
        properties=properties,
        items=_build_schema(spec, items, resolving) if items is not None else None,
        description=node.get("description") or "",
    )


def _build_parameters(spec: dict[str, Any], raw: list[Any]) -> list[Parameter]:
    params = []
    for param in raw or []:
        if "$ref" in param:
            try:
                param = resolve_ref(spec, param["$ref"])
            except (KeyError, IndexError, TypeError):
                logger.warning("Unresolvable parameter reference %s skipped", param["$ref"])
                continue
        if "name" not in param:
            continue
        params.append(Parameter(
            name=param["name"],
            location=param.get("in", "query"),
            required=bool(param.get("required", False)),
        ))
    return params


def _merge_parameters(shared: list[Parameter], own: list[Parameter]) -> tuple[Parameter, ...]:
    """Operation-level parameters override path-level ones with the same (name, in)."""
    overridden = {(p.name, p.location) for p in own}
    merged = [p for p in shared if (p.name, p.location) not in overridden]
    return tuple(merged + own)


def build_document(spec: dict[str, Any]) -> Document:
    """Convert a parsed OpenAPI mapping into a Document."""
    schemas = {
        name: _build_schema(spec, node, frozenset({_SCHEMA_REF_PREFIX + name}))
        for name, node in get_schemas(spec).items()
    }

    paths = []
    for path, path_item in get_paths(spec).items():
        path_item = path_item or {}
        shared = _build_parameters(spec, path_item.get("parameters", []))
        operations = {}
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            own = _build_parameters(spec, operation.get("parameters", []))
            operations[method.lower()] = Operation(
                parameters=_merge_parameters(shared, own),
                summary=operation.get("summary") or "",
                operation_id=operation.get("operationId"),
            )
        paths.append(PathItem(path=path, operations=operations))

    info = spec.get("info") or {}
    return Document(
        schemas=schemas,
        paths=tuple(paths),
        title=str(info.get("title", "")),
        version=str(info.get("version", "")),
    )


def load_document(path: Path) -> Document:
    """Load a file and convert it into a Document."""
    return build_document(load_spec(path))
