"""Error handling — exception hierarchy for frontmatter operations."""

from apidoc_frontmatter.errors.exceptions import (
    ConfigurationError,
    DocumentIOError,
    FrontmatterError,
    MalformedFrontmatterError,
    UnknownCategoryError,
)

__all__ = [
    "FrontmatterError",
    "ConfigurationError",
    "UnknownCategoryError",
    "MalformedFrontmatterError",
    "DocumentIOError",
]
