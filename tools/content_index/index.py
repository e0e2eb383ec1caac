from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Union

from .config import ContentRoots
from .entries import Category, ContentEntry
from .errors import MalformedContent
from .extract import category_dir, extract, read_entry

logger = logging.getLogger(__name__)

Renderer = Callable[[str], Any]


def sort_posts(entries: Iterable[ContentEntry]) -> List[ContentEntry]:
    """Newest first. Equal dates keep their incoming order."""
    return sorted(entries, key=lambda e: e.date, reverse=True)


def sort_projects(entries: Iterable[ContentEntry]) -> List[ContentEntry]:
    """
    Featured projects first, then ascending order (absent = 9999), then
    newest first. Both passes are stable, so full ties keep their
    incoming order.
    """
    by_date = sorted(entries, key=lambda e: e.date, reverse=True)
    return sorted(by_date, key=lambda e: (not e.featured, e.effective_order))


_SORTERS = {
    Category.POST: sort_posts,
    Category.PROJECT: sort_projects,
}


class ContentIndex:
    """
    Lists and looks up content entries under a set of roots.

    Every call reads the backing files again; nothing is cached.
    """

    def __init__(
        self, roots: ContentRoots, renderer: Optional[Renderer] = None
    ) -> None:
        self.roots = roots
        self._renderer = renderer

    def identifiers(self, category: Union[Category, str]) -> List[str]:
        category = Category(category)
        directory = category_dir(self.roots, category)
        if not directory.is_dir():
            logger.debug("no %s directory at %s", category.value, directory)
            return []
        suffix = self.roots.suffix
        return [
            p.name[: -len(suffix)]
            for p in sorted(directory.iterdir())
            if p.is_file()
            and p.name.endswith(suffix)
            and not p.name.startswith(".")
        ]

    def list(self, category: Union[Category, str]) -> List[ContentEntry]:
        category = Category(category)
        directory = category_dir(self.roots, category)
        entries: List[ContentEntry] = []
        for identifier in self.identifiers(category):
            path = directory / f"{identifier}{self.roots.suffix}"
            try:
                entries.append(read_entry(path, category, identifier))
            except MalformedContent as e:
                logger.warning("skipping %s: %s", identifier, e)
            except FileNotFoundError:
                logger.debug("%s vanished while listing, skipping", path)
        logger.debug("indexed %d %s entries", len(entries), category.value)
        return _SORTERS[category](entries)

    def get(self, category: Union[Category, str], identifier: str) -> ContentEntry:
        return extract(self.roots, category, identifier)

    def render(self, entry: ContentEntry) -> Any:
        if self._renderer is None:
            from .markdown_processing import render_markdown

            return render_markdown(entry.body)
        return self._renderer(entry.body)
