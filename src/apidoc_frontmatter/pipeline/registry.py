"""Registry of document operations runnable by the batch walker."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from apidoc_frontmatter.document import Document
from apidoc_frontmatter.types import CategoryDescriptor, Outcome

# (document, descriptor, index, **options) -> (document, outcome)
Operation = Callable[..., tuple[Document, Outcome]]

_OPERATION_REGISTRY: dict[str, Operation] = {}


def register_operation(name: str) -> Callable[[Operation], Operation]:
    """Decorator to register a document operation."""

    def decorator(fn: Operation) -> Operation:
        _OPERATION_REGISTRY[name] = fn
        return fn

    return decorator


def get_operation(name: str) -> Operation | None:
    return _OPERATION_REGISTRY.get(name)


def list_operations() -> list[str]:
    return sorted(_OPERATION_REGISTRY)


def apply_operation(
    name: str,
    document: Document,
    descriptor: CategoryDescriptor,
    index: int,
    **options: Any,
) -> tuple[Document, Outcome]:
    fn = get_operation(name)
    if fn is None:
        raise KeyError(f"Unknown operation: {name}")
    return fn(document, descriptor, index, **options)
