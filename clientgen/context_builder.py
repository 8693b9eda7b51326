"""Build Jinja2 template context from the document model.

Resolves names, annotations and request shapes so the templates only
have to lay out text.
"""

from __future__ import annotations

from typing import Any

from .config import GeneratorConfig
from .model import Document, Operation
from .naming import deduplicate, field_name, type_name
from .pagination import PaginationClassifier, is_paginated
from .type_mapper import map_type, optional

# HTTP methods whose generated request carries a JSON body
BODY_METHODS = {"post", "put", "patch"}


def _docstring_text(text: str) -> str:
    """First line of text, safe to place inside a triple-quoted docstring."""
    line = text.strip().splitlines()[0].strip() if text.strip() else ""
    return line.replace("\\", "\\\\").replace('"', '\\"')


def build_header_context(document: Document, config: GeneratorConfig) -> dict[str, Any]:
    return {
        "title": _docstring_text(document.title),
        "version": _docstring_text(document.version),
        "max_attempts": config.max_attempts,
        "backoff_unit": config.backoff_unit,
    }


def build_struct_context(document: Document, client_class: str = "Client") -> list[dict[str, Any]]:
    """One entry per component schema, in document order."""
    class_names = [type_name(key) for key in document.schemas]
    class_names = deduplicate([f"{n}Model" if n == client_class else n for n in class_names])
    structs = []

    for class_name, (key, schema) in zip(class_names, document.schemas.items()):
        props = list(schema.properties.items())
        attr_names = deduplicate([field_name(prop) for prop, _ in props])
        fields = [
            {
                "name": attr,
                "json_name": prop,
                "annotation": optional(map_type(prop_schema)),
            }
            for attr, (prop, prop_schema) in zip(attr_names, props)
        ]
        structs.append({
            "name": class_name,
            "schema_name": key,
            "description": _docstring_text(schema.description) or f"The {key} schema.",
            "fields": fields,
        })

    return structs


def build_endpoint_context(
    name: str,
    path: str,
    method: str,
    operation: Operation,
    classifier: PaginationClassifier = is_paginated,
) -> dict[str, Any]:
    """Context for one generated Client method."""
    method_lower = method.lower()
    paginated = classifier(operation)
    summary = _docstring_text(operation.summary)
    if not summary:
        summary = _docstring_text(f"Execute a {method.upper()} request to {path}.")

    return {
        "name": name,
        "method": method.upper(),
        "path": path,
        "paginated": paginated,
        "has_body": method_lower in BODY_METHODS,
        # Paginated methods only ever send limit/offset
        "query_params": [] if paginated else [p.name for p in operation.query_parameters()],
        "summary": summary,
    }
