"""Operation: prepend a synthesized metadata block to a markdown document."""

from __future__ import annotations

from typing import Any

from apidoc_frontmatter.document import Document
from apidoc_frontmatter.pipeline.registry import register_operation
from apidoc_frontmatter.types import CategoryDescriptor, MetadataBlock, Outcome


@register_operation("inject")
def inject_frontmatter(
    document: Document,
    descriptor: CategoryDescriptor,
    index: int = 0,
    product_name: str = "OpenSeadragon",
    **kwargs: Any,
) -> tuple[Document, Outcome]:
    """Add a metadata block built from ``descriptor`` to the top of ``document``.

    ``index`` is the document's zero-based position in its folder and is
    added to the descriptor's base order. Documents that already start with
    a delimiter are returned unchanged.
    """
    if document.has_frontmatter:
        return document, Outcome.SKIPPED_PRESENT

    block = MetadataBlock.for_document(document.title, descriptor, index, product_name)
    return document.with_body(block.render() + document.body), Outcome.ADDED
