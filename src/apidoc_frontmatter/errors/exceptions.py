"""Custom exception hierarchy for apidoc-frontmatter."""

from __future__ import annotations

from pathlib import Path


class FrontmatterError(Exception):
    """Base exception for all apidoc-frontmatter errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(FrontmatterError):
    """Invalid configuration — bad config values or category table entries."""

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class UnknownCategoryError(ConfigurationError):
    """Folder name has no entry in the classification table."""

    def __init__(self, folder: str) -> None:
        super().__init__(f"Unrecognized category folder: {folder!r}", key=folder)
        self.folder = folder


class MalformedFrontmatterError(FrontmatterError):
    """Metadata block is unterminated or does not open with a bare delimiter.

    The document is left untouched when this is raised.
    """

    def __init__(self, message: str = "", path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DocumentIOError(FrontmatterError):
    """Read or write failure isolated to a single document — other files continue."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original
