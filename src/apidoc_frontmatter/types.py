"""Shared Pydantic models for apidoc-frontmatter."""

from __future__ import annotations

from collections import Counter
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

# ── Enums ──


class Outcome(StrEnum):
    ADDED = "added"
    SKIPPED_PRESENT = "skipped_present"
    REMOVED = "removed"
    SKIPPED_ABSENT = "skipped_absent"
    MALFORMED = "malformed"
    FAILED = "failed"


# Outcomes that make a run exit non-zero
ERROR_OUTCOMES = frozenset({Outcome.MALFORMED, Outcome.FAILED})


# ── Config models ──


class CategoryDescriptor(BaseModel):
    """Classification for one API folder: display title, base sort order, badge."""

    title: str
    base_order: int = Field(ge=0)
    badge: str
    model_config = {"frozen": True}


# ── Document models ──


class MetadataBlock(BaseModel):
    title: str
    description: str
    category: str
    order: int
    badge: str
    model_config = {"frozen": True}

    @classmethod
    def for_document(
        cls,
        title: str,
        descriptor: CategoryDescriptor,
        index: int,
        product_name: str = "OpenSeadragon",
    ) -> MetadataBlock:
        return cls(
            title=title,
            description=f"{product_name} {descriptor.badge} - {title}",
            category=descriptor.title,
            order=descriptor.base_order + index,
            badge=descriptor.badge,
        )

    def render(self) -> str:
        """Render the block as written to disk, including the blank separator line."""
        lines = [
            "---",
            f"title: {self.title}",
            f"description: {self.description}",
            f"category: {self.category}",
            f"order: {self.order}",
            f"badge: {self.badge}",
            "---",
            "",
            "",
        ]
        return "\n".join(lines)


# ── Runtime models ──


class FileOutcome(BaseModel):
    path: Path
    outcome: Outcome
    message: str | None = None
    order: int | None = None

    @property
    def is_error(self) -> bool:
        return self.outcome in ERROR_OUTCOMES


class FolderReport(BaseModel):
    folder: str
    path: Path
    files: list[FileOutcome] = Field(default_factory=list)
    error: str | None = None

    @property
    def has_errors(self) -> bool:
        return self.error is not None or any(f.is_error for f in self.files)


class RunReport(BaseModel):
    operation: str
    root: Path
    dry_run: bool = False
    folders: list[FolderReport] = Field(default_factory=list)

    @property
    def files(self) -> list[FileOutcome]:
        return [f for folder in self.folders for f in folder.files]

    @property
    def counts(self) -> dict[Outcome, int]:
        """Number of files per outcome, zero-filled for every outcome."""
        tally = Counter(f.outcome for f in self.files)
        return {outcome: tally.get(outcome, 0) for outcome in Outcome}

    @property
    def has_errors(self) -> bool:
        return any(folder.has_errors for folder in self.folders)
