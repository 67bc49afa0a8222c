import pytest

from apidoc_frontmatter.categories import DEFAULT_TABLE
from apidoc_frontmatter.types import CategoryDescriptor


@pytest.fixture
def classes_descriptor():
    return CategoryDescriptor(title="API Classes", base_order=10, badge="Class")


@pytest.fixture
def api_root(tmp_path):
    """An empty API docs root with the four default category folders."""
    root = tmp_path / "content" / "docs" / "api"
    for folder in DEFAULT_TABLE.folders:
        (root / folder).mkdir(parents=True)
    return root


@pytest.fixture
def write_md():
    """Write a file byte-exactly (no newline translation) and return its path."""

    def _write(path, text):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    return _write


@pytest.fixture
def read_md():
    """Read a file back without newline translation."""

    def _read(path):
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    return _read
