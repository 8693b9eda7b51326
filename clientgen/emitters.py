"""Render the individual sections of a generated client.

Each emitter returns a text fragment without leading or trailing blank
lines; codegen.generate_client lays the fragments out.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

import jinja2

from .config import GeneratorConfig
from .context_builder import build_endpoint_context, build_header_context, build_struct_context
from .model import Document, Operation
from .pagination import PaginationClassifier, is_paginated

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    # JSON string literals are valid double-quoted Python literals
    env.filters["literal"] = json.dumps
    return env


def _render(template_name: str, **context) -> str:
    return get_environment().get_template(template_name).render(**context).strip("\n")


def emit_header(document: Document, config: GeneratorConfig) -> str:
    """Module docstring, imports, retry constants, errors, helpers and BaseClient."""
    return _render("header.py.j2", **build_header_context(document, config))


def emit_transport() -> str:
    """The send_with_retries coroutine every generated method goes through."""
    return _render("transport.py.j2")


def emit_structs(document: Document, client_class: str = "Client") -> str:
    """One dataclass per component schema, separated by two blank lines."""
    return "\n\n\n".join(
        _render("struct.py.j2", **struct) for struct in build_struct_context(document, client_class)
    )


def emit_endpoint(
    name: str,
    path: str,
    method: str,
    operation: Operation,
    classifier: PaginationClassifier = is_paginated,
) -> str:
    """One async Client method, indented for the class body.

    The paginated shape is used when ``classifier`` accepts the operation.
    """
    context = build_endpoint_context(name, path, method, operation, classifier)
    return _render("endpoint.py.j2", **context)


def emit_client_class(client_class: str, endpoints: list[str]) -> str:
    return _render("client_class.py.j2", client_class=client_class, endpoints=endpoints)
