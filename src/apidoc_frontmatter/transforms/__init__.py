"""Built-in document operations — auto-registered on import."""

from apidoc_frontmatter.transforms.inject import inject_frontmatter
from apidoc_frontmatter.transforms.strip import strip_frontmatter

__all__ = [
    "inject_frontmatter",
    "strip_frontmatter",
]
