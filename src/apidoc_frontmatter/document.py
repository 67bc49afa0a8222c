"""In-memory markdown document and line-oriented frontmatter helpers."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

from apidoc_frontmatter.errors import MalformedFrontmatterError

DELIMITER = "---"
MARKDOWN_SUFFIX = ".md"

# First top-level heading anywhere in the body: "# Title"
_H1_PATTERN = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)


class Document(BaseModel):
    """A markdown file's full text, detached from the filesystem."""

    body: str
    path: Path | None = None

    @property
    def has_frontmatter(self) -> bool:
        return self.body.startswith(DELIMITER)

    @property
    def title(self) -> str:
        """First ``# `` heading text, else the filename stem."""
        match = _H1_PATTERN.search(self.body)
        if match:
            title = match.group(1).strip()
            if title:
                return title
        if self.path is not None:
            return self.path.name.removesuffix(MARKDOWN_SUFFIX)
        return "Untitled"

    def with_body(self, body: str) -> Document:
        return Document(body=body, path=self.path)


def is_delimiter_line(line: str) -> bool:
    return line.rstrip("\r\n") == DELIMITER


def split_frontmatter(text: str, path: Path | None = None) -> tuple[str, str]:
    """Split ``text`` into its metadata block and the body that follows it.

    The block runs from the opening ``---`` line through the next ``---``
    line. One blank separator line directly after the closing delimiter
    belongs to the block.

    Raises:
        MalformedFrontmatterError: If the first line is not exactly ``---``
            or the block is never closed.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not is_delimiter_line(lines[0]):
        raise MalformedFrontmatterError("Opening line is not a bare '---' delimiter", path=path)

    for close, line in enumerate(lines[1:], start=1):
        if is_delimiter_line(line):
            break
    else:
        raise MalformedFrontmatterError("Metadata block has no closing '---' delimiter", path=path)

    end = close + 1
    if end < len(lines) and lines[end] in ("\n", "\r\n"):
        end += 1

    return "".join(lines[:end]), "".join(lines[end:])
