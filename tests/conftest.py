"""
conftest.py
-----------
Shared pytest fixtures for the content index tests.

Provides fixtures for:
- Temporary site trees with content/blog and content/projects
- A helper that writes .mdx files with YAML front matter
"""
import pytest
import yaml
from pathlib import Path

from content_index.config import ContentRoots
from content_index.index import ContentIndex


def _write(directory: Path, slug: str, fm=None, body="Body text.\n", raw=None):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug}.mdx"
    if raw is None:
        block = yaml.safe_dump(fm or {}, sort_keys=False).strip() if fm else ""
        raw = f"---\n{block}\n---\n\n{body}" if block else f"---\n---\n\n{body}"
    path.write_text(raw, encoding="utf-8")
    return path


@pytest.fixture
def site(tmp_path):
    """Empty site directory with both content folders."""
    (tmp_path / "content" / "blog").mkdir(parents=True)
    (tmp_path / "content" / "projects").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def roots(site):
    return ContentRoots.from_base(site)


@pytest.fixture
def index(roots):
    return ContentIndex(roots)


@pytest.fixture
def write_post(roots):
    """Write a post file: write_post(slug, {front matter}, body=..., raw=...)."""
    def _post(slug, fm=None, **kwargs):
        return _write(roots.posts_root, slug, fm, **kwargs)
    return _post


@pytest.fixture
def write_project(roots):
    """Write a project file: write_project(slug, {front matter}, ...)."""
    def _project(slug, fm=None, **kwargs):
        return _write(roots.projects_root, slug, fm, **kwargs)
    return _project
