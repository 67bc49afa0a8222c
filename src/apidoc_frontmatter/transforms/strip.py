"""Operation: remove a leading metadata block from a markdown document."""

from __future__ import annotations

import re
from typing import Any

from apidoc_frontmatter.document import Document, split_frontmatter
from apidoc_frontmatter.pipeline.registry import register_operation
from apidoc_frontmatter.types import CategoryDescriptor, Outcome

_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")
_TRAILING_BLANK_LINES = re.compile(r"(?:\r?\n[ \t]*)+\Z")


@register_operation("strip")
def strip_frontmatter(
    document: Document,
    descriptor: CategoryDescriptor | None = None,
    index: int = 0,
    normalize: bool = False,
    **kwargs: Any,
) -> tuple[Document, Outcome]:
    """Remove the metadata block at the top of ``document``.

    The body after the block is kept byte-for-byte unless ``normalize`` is
    set, in which case blank lines before and after the body are dropped
    and a single trailing newline is added. Indentation and trailing spaces
    on content lines are kept.

    Raises:
        MalformedFrontmatterError: If the block is not well formed. The
            caller keeps the original document.
    """
    if not document.has_frontmatter:
        return document, Outcome.SKIPPED_ABSENT

    _, body = split_frontmatter(document.body, path=document.path)
    if normalize:
        body = _TRAILING_BLANK_LINES.sub("", _LEADING_BLANK_LINES.sub("", body)) + "\n"
    return document.with_body(body), Outcome.REMOVED
