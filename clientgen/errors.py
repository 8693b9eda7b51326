"""Exceptions raised by the generator."""

from __future__ import annotations


class GenerationError(Exception):
    """Generated code could not be produced."""


class NameCollisionError(GenerationError):
    """Two operations map to the same generated method name."""

    def __init__(self, name: str, sources: list[tuple[str, str]]) -> None:
        self.name = name
        self.sources = sources
        where = ", ".join(f"{method.upper()} {path}" for method, path in sources)
        super().__init__(f"generated name {name!r} is used by: {where}")


class SpecLoadError(Exception):
    """An API description file could not be read or parsed."""
