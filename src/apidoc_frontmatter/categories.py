"""Folder classification table — maps API folder names to category descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from apidoc_frontmatter.errors import ConfigurationError, UnknownCategoryError
from apidoc_frontmatter.types import CategoryDescriptor

logger = logging.getLogger(__name__)

DEFAULT_ORDER_STEP = 10

# (folder, title, badge) in processing order
_DEFAULT_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    ("classes", "API Classes", "Class"),
    ("members", "API Members", "Member"),
    ("methods", "API Methods", "Method"),
    ("types", "API Types", "Type"),
)


class CategoryTable(Mapping[str, CategoryDescriptor]):
    """Immutable, ordered lookup of category descriptors keyed by folder name.

    Built once at startup and handed to the inject and strip operations.
    Iteration order is the folder processing order.
    """

    def __init__(self, entries: Mapping[str, CategoryDescriptor]) -> None:
        if not entries:
            raise ConfigurationError("Category table must have at least one folder", key="categories")
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, folder: str) -> CategoryDescriptor:
        try:
            return self._entries[folder]
        except KeyError:
            raise UnknownCategoryError(folder) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CategoryTable({list(self._entries)!r})"

    def __contains__(self, folder: object) -> bool:
        return folder in self._entries

    def get(self, folder: str, default: Any = None) -> Any:
        return self._entries.get(folder, default)

    @property
    def folders(self) -> list[str]:
        return list(self._entries)

    @property
    def order_step(self) -> int | None:
        """Smallest gap between consecutive base orders, or None for a single folder."""
        orders = sorted(d.base_order for d in self._entries.values())
        gaps = [b - a for a, b in zip(orders, orders[1:])]
        return min(gaps) if gaps else None


def with_order_step(step: int = DEFAULT_ORDER_STEP) -> CategoryTable:
    """Default table with base orders spaced by ``step`` (step, 2*step, ...)."""
    if step < 1:
        raise ConfigurationError(f"order_step must be positive, got {step}", key="order_step")
    return CategoryTable(
        {
            folder: CategoryDescriptor(title=title, base_order=step * (i + 1), badge=badge)
            for i, (folder, title, badge) in enumerate(_DEFAULT_CATEGORIES)
        }
    )


def build_category_table(
    mapping: Mapping[str, Any] | None = None,
    order_step: int = DEFAULT_ORDER_STEP,
) -> CategoryTable:
    """Build the classification table from config.

    With no mapping, returns the default four-folder table. Otherwise each
    entry must provide ``title``, ``base_order`` and ``badge``.
    """
    if mapping is None:
        return with_order_step(order_step)

    if not isinstance(mapping, Mapping):
        raise ConfigurationError(
            f"categories must be a mapping, got {type(mapping).__name__}", key="categories"
        )

    entries: dict[str, CategoryDescriptor] = {}
    for folder, info in mapping.items():
        if not isinstance(info, Mapping):
            raise ConfigurationError(f"Category {folder!r} must be a mapping", key=str(folder))
        try:
            entries[str(folder)] = CategoryDescriptor(**info)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid category {folder!r}: {e}", key=str(folder)) from e

    logger.debug("Loaded %d categories from config", len(entries))
    return CategoryTable(entries)


DEFAULT_TABLE = with_order_step(DEFAULT_ORDER_STEP)
