"""Tests for run report models and rendering."""

from pathlib import Path

from rich.console import Console

from apidoc_frontmatter.categories import DEFAULT_TABLE
from apidoc_frontmatter.report import render_categories, render_report
from apidoc_frontmatter.types import FileOutcome, FolderReport, Outcome, RunReport


def _report(dry_run=False):
    return RunReport(
        operation="inject",
        root=Path("api"),
        dry_run=dry_run,
        folders=[
            FolderReport(
                folder="classes",
                path=Path("api/classes"),
                files=[
                    FileOutcome(path=Path("api/classes/A.md"), outcome=Outcome.ADDED, order=10),
                    FileOutcome(path=Path("api/classes/B.md"), outcome=Outcome.SKIPPED_PRESENT),
                ],
            ),
            FolderReport(folder="types", path=Path("api/types"), error="No such folder"),
        ],
    )


def _console():
    return Console(record=True, width=200)


class TestRunReport:
    def test_counts_zero_filled(self):
        counts = _report().counts
        assert counts[Outcome.ADDED] == 1
        assert counts[Outcome.SKIPPED_PRESENT] == 1
        assert counts[Outcome.FAILED] == 0
        assert set(counts) == set(Outcome)

    def test_files_flattened(self):
        assert [f.path.name for f in _report().files] == ["A.md", "B.md"]

    def test_folder_error_is_error(self):
        assert _report().has_errors

    def test_malformed_is_error(self):
        folder = FolderReport(
            folder="x",
            path=Path("x"),
            files=[FileOutcome(path=Path("x/a.md"), outcome=Outcome.MALFORMED)],
        )
        assert folder.has_errors

    def test_skips_are_not_errors(self):
        folder = FolderReport(
            folder="x",
            path=Path("x"),
            files=[FileOutcome(path=Path("x/a.md"), outcome=Outcome.SKIPPED_ABSENT)],
        )
        assert not folder.has_errors


class TestRenderReport:
    def test_lists_files_and_errors(self):
        console = _console()
        render_report(_report(), console)
        text = console.export_text()
        assert "A.md" in text
        assert "added" in text
        assert "No such folder" in text
        assert "added: 1" in text

    def test_bracketed_names_shown_literally(self):
        report = RunReport(
            operation="strip",
            root=Path("api"),
            folders=[
                FolderReport(
                    folder="classes",
                    path=Path("api/classes"),
                    files=[
                        FileOutcome(
                            path=Path("api/classes/[deprecated]Foo.md"),
                            outcome=Outcome.MALFORMED,
                            message="[bold]no closing delimiter",
                        )
                    ],
                ),
                FolderReport(folder="types", path=Path("api/types"), error="Cannot read [types]"),
            ],
        )
        console = _console()
        render_report(report, console)
        text = console.export_text()
        assert "[deprecated]Foo.md" in text
        assert "[bold]no closing delimiter" in text
        assert "Cannot read [types]" in text

    def test_dry_run_title(self):
        console = _console()
        render_report(_report(dry_run=True), console)
        assert "dry run" in console.export_text()

    def test_empty(self):
        console = _console()
        render_report(RunReport(operation="strip", root=Path("api")), console)
        assert "No markdown files found" in console.export_text()


class TestRenderCategories:
    def test_table(self):
        console = _console()
        render_categories(DEFAULT_TABLE, console)
        text = console.export_text()
        assert "API Classes" in text
        assert "40" in text
