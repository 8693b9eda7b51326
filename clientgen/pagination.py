"""Decide which generated method shape an operation gets."""

from __future__ import annotations

from typing import Protocol

from .model import Operation

PAGINATION_PARAMS = frozenset({"limit", "offset"})


class PaginationClassifier(Protocol):
    def __call__(self, operation: Operation) -> bool: ...


def is_paginated(operation: Operation) -> bool:
    """True if any parameter is named exactly ``limit`` or ``offset``.

    Name-based heuristic; the parameter's location is ignored.
    """
    return any(p.name in PAGINATION_PARAMS for p in operation.parameters)
