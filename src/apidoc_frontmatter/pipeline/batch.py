"""Batch walker — apply a document operation to every API folder under a root.

Folders are processed in classification-table order and files in sorted
filename order. Failures stay local: a missing folder is recorded on its
FolderReport, a bad file on its FileOutcome, and the walk carries on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import apidoc_frontmatter.transforms  # noqa: F401  (registers operations)
from apidoc_frontmatter.categories import CategoryTable
from apidoc_frontmatter.document import MARKDOWN_SUFFIX, Document
from apidoc_frontmatter.errors import DocumentIOError, MalformedFrontmatterError
from apidoc_frontmatter.pipeline.registry import apply_operation, get_operation
from apidoc_frontmatter.types import (
    CategoryDescriptor,
    FileOutcome,
    FolderReport,
    Outcome,
    RunReport,
)

logger = logging.getLogger(__name__)

_OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.ADDED: "Added frontmatter",
    Outcome.SKIPPED_PRESENT: "Skipping (already has frontmatter)",
    Outcome.REMOVED: "Removed frontmatter",
    Outcome.SKIPPED_ABSENT: "Skipping (no frontmatter)",
}


def run_batch(
    operation: str,
    root: str | Path,
    table: CategoryTable,
    *,
    dry_run: bool = False,
    **options: Any,
) -> RunReport:
    """Run ``operation`` ("inject" or "strip") over every folder in ``table``.

    Extra keyword options are passed through to the operation
    (``product_name`` for inject, ``normalize`` for strip).

    Returns:
        A RunReport with one FolderReport per table entry, in table order.
    """
    if get_operation(operation) is None:
        raise KeyError(f"Unknown operation: {operation}")

    root = Path(root)
    report = RunReport(operation=operation, root=root, dry_run=dry_run)
    # Only injected orders can collide across categories
    step = table.order_step if operation == "inject" else None

    for folder in table.folders:
        folder_path = root / folder
        logger.info("Processing %s...", folder)
        report.folders.append(
            process_folder(
                operation,
                folder,
                folder_path,
                table[folder],
                dry_run=dry_run,
                step=step,
                **options,
            )
        )

    return report


def process_folder(
    operation: str,
    folder: str,
    folder_path: Path,
    descriptor: CategoryDescriptor,
    *,
    dry_run: bool = False,
    step: int | None = None,
    **options: Any,
) -> FolderReport:
    """Apply ``operation`` to each markdown file directly inside ``folder_path``."""
    folder_report = FolderReport(folder=folder, path=folder_path)

    try:
        files = list_markdown_files(folder_path)
    except OSError as e:
        folder_report.error = f"Cannot read folder {folder_path}: {e}"
        logger.error(folder_report.error)
        return folder_report

    if step is not None and len(files) > step:
        logger.warning(
            "%s has %d files; orders past base %d + %d overlap the next category",
            folder,
            len(files),
            descriptor.base_order,
            step - 1,
        )

    for index, path in enumerate(files):
        outcome = process_file(operation, path, descriptor, index, dry_run=dry_run, **options)
        folder_report.files.append(outcome)

    return folder_report


def list_markdown_files(folder_path: Path) -> list[Path]:
    """Sorted ``.md`` files directly inside ``folder_path``.

    Raises:
        OSError: If the folder is missing or unreadable.
    """
    if not folder_path.is_dir():
        raise FileNotFoundError(f"No such folder: {folder_path}")
    return sorted(
        (p for p in folder_path.iterdir() if p.suffix == MARKDOWN_SUFFIX and p.is_file()),
        key=lambda p: p.name,
    )


def process_file(
    operation: str,
    path: Path,
    descriptor: CategoryDescriptor,
    index: int,
    *,
    dry_run: bool = False,
    **options: Any,
) -> FileOutcome:
    """Read, transform and write back one file. Never raises for per-file problems."""
    try:
        document = read_document(path)
    except DocumentIOError as e:
        logger.error("Failed to read %s: %s", path.name, e)
        return FileOutcome(path=path, outcome=Outcome.FAILED, message=e.message)

    try:
        result, outcome = apply_operation(operation, document, descriptor, index, **options)
    except MalformedFrontmatterError as e:
        logger.warning("Leaving %s unchanged (malformed frontmatter: %s)", path.name, e.message)
        return FileOutcome(path=path, outcome=Outcome.MALFORMED, message=e.message)

    if result.body != document.body and not dry_run:
        try:
            write_document(result)
        except DocumentIOError as e:
            logger.error("Failed to write %s: %s", path.name, e)
            return FileOutcome(path=path, outcome=Outcome.FAILED, message=e.message)

    order = descriptor.base_order + index if outcome == Outcome.ADDED else None
    logger.info("%s: %s", _OUTCOME_MESSAGES.get(outcome, outcome.value), path.name)
    return FileOutcome(path=path, outcome=outcome, order=order)


def read_document(path: Path) -> Document:
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return Document(body=f.read(), path=path)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"Cannot read {path}: {e}", path=path, original=e) from e


def write_document(document: Document) -> None:
    if document.path is None:
        raise DocumentIOError("Document has no path to write to")
    try:
        with open(document.path, "w", encoding="utf-8", newline="") as f:
            f.write(document.body)
    except OSError as e:
        raise DocumentIOError(
            f"Cannot write {document.path}: {e}", path=document.path, original=e
        ) from e
