"""Shared fixtures for generator tests.

Generated clients are written to tmp_path and imported like any other
module, then driven through httpx.MockTransport.
"""

from __future__ import annotations

import importlib.util
import sys
from types import ModuleType
from typing import Callable

import httpx
import pytest

from clientgen.codegen import generate_client, write_client
from clientgen.config import GeneratorConfig
from clientgen.model import Document, Operation, Parameter, PathItem, Schema


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@pytest.fixture
def pets_document() -> Document:
    """Small document covering plain, query-param and paginated operations."""
    return Document(
        schemas={
            "Pet": Schema("object", {
                "name": Schema("string"),
                "petAge": Schema("integer"),
                "tags": Schema("array", items=Schema("string")),
                "owner": Schema("object", {"id": Schema("integer")}),
            }),
            "Error": Schema("object", {"message": Schema("string")}),
        },
        paths=(
            PathItem("/pets", {
                "get": Operation((Parameter("status", "query"), Parameter("X-Trace", "header"))),
                "post": Operation(summary="Create a pet"),
            }),
            PathItem("/pets/{petId}", {
                "get": Operation((Parameter("petId", "path", required=True),)),
                "put": Operation((Parameter("petId", "path", required=True),)),
                "delete": Operation((Parameter("petId", "path", required=True),)),
            }),
            PathItem("/pets/search", {
                "get": Operation((Parameter("limit", "query"), Parameter("offset", "query"))),
                "post": Operation((Parameter("limit", "query"),)),
            }),
        ),
        title="Pet Store",
        version="1.0.0",
    )


# ---------------------------------------------------------------------------
# Generated module loader
# ---------------------------------------------------------------------------

@pytest.fixture
def load_client(tmp_path) -> Callable[..., ModuleType]:
    """Generate, write and import a client module for a document.

    Usage::

        module = load_client(document, GeneratorConfig(backoff_unit=0))
    """
    loaded: list[str] = []

    def _load(document: Document, config: GeneratorConfig | None = None) -> ModuleType:
        name = f"generated_client_{len(loaded)}"
        path = write_client(generate_client(document, config), tmp_path / f"{name}.py")
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        spec.loader.exec_module(module)
        loaded.append(name)
        return module

    yield _load

    for name in loaded:
        sys.modules.pop(name, None)


# ---------------------------------------------------------------------------
# Mock HTTP
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Return a factory for httpx.AsyncClient instances backed by a handler."""
    def _make(handler):
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="http://api.test",
        )
    return _make


class RecordingHandler:
    """MockTransport handler replaying a list of statuses or exceptions."""

    def __init__(self, *outcomes, json_body=None, content=None) -> None:
        self.outcomes = list(outcomes)
        self.json_body = {} if json_body is None else json_body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        if self.content is not None:
            return httpx.Response(outcome, content=self.content)
        return httpx.Response(outcome, json=self.json_body)

    @property
    def attempts(self) -> int:
        return len(self.requests)


@pytest.fixture
def recorder() -> type[RecordingHandler]:
    return RecordingHandler
