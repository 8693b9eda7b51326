"""In-memory document model consumed by the generator.

Produced by loader.build_document (or built directly in tests), read-only
for the duration of a generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Schema:
    """A data shape: object, array, primitive, or unknown."""

    kind: str | None = None
    properties: dict[str, Schema] = field(default_factory=dict)
    items: Schema | None = None
    description: str = ""


@dataclass(frozen=True)
class Parameter:
    name: str
    location: str
    required: bool = False


@dataclass(frozen=True)
class Operation:
    parameters: tuple[Parameter, ...] = ()
    summary: str = ""
    operation_id: str | None = None

    def query_parameters(self) -> list[Parameter]:
        return [p for p in self.parameters if p.location == "query"]


@dataclass(frozen=True)
class PathItem:
    """A URL path paired with its operations, keyed by lower-case method."""

    path: str
    operations: dict[str, Operation] = field(default_factory=dict)


@dataclass(frozen=True)
class Document:
    schemas: dict[str, Schema] = field(default_factory=dict)
    paths: tuple[PathItem, ...] = ()
    title: str = ""
    version: str = ""

    def iter_operations(self):
        """Yield (path, method, operation) in document order."""
        for item in self.paths:
            for method, operation in item.operations.items():
                yield item.path, method, operation
