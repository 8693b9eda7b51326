"""Assemble a complete client module and write it to disk.

Layout: header, retry transport, schema dataclasses, then the Client class
with one method per (path, method) in document order.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from .config import GeneratorConfig
from .emitters import emit_client_class, emit_endpoint, emit_header, emit_structs, emit_transport
from .errors import GenerationError, NameCollisionError
from .model import Document
from .naming import function_name
from .pagination import PaginationClassifier, is_paginated

logger = logging.getLogger(__name__)


def _check_collisions(sources: dict[str, list[tuple[str, str]]], strict: bool) -> None:
    for name, where in sources.items():
        if len(where) < 2:
            continue
        if strict:
            raise NameCollisionError(name, where)
        logger.warning(
            "Generated name %s is used by %d operations (%s); later definitions shadow earlier ones",
            name,
            len(where),
            ", ".join(f"{method.upper()} {path}" for method, path in where),
        )


def generate_client(
    document: Document,
    config: GeneratorConfig | None = None,
    classifier: PaginationClassifier = is_paginated,
) -> str:
    """Generate the source of a client module for ``document``."""
    config = config or GeneratorConfig()

    endpoints: list[str] = []
    sources: dict[str, list[tuple[str, str]]] = {}
    for path, method, operation in document.iter_operations():
        name = function_name(method, path)
        sources.setdefault(name, []).append((method, path))
        endpoints.append(emit_endpoint(name, path, method, operation, classifier))

    _check_collisions(sources, config.strict_names)

    sections = [emit_header(document, config), emit_transport()]
    structs = emit_structs(document, config.client_class)
    if structs:
        sections.append(structs)
    sections.append(emit_client_class(config.client_class, endpoints))
    code = "\n\n\n".join(sections) + "\n"

    try:
        ast.parse(code)
    except SyntaxError as exc:
        raise GenerationError(f"generated code is not valid Python: {exc}") from exc

    logger.info(
        "Generated client with %d schemas and %d operations",
        len(document.schemas),
        len(endpoints),
    )
    return code


def write_client(code: str, output_path: Path) -> Path:
    """Write generated code to ``output_path``, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(code, encoding="utf-8")
    return output_path
