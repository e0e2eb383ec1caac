from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_LIMIT, FEATURED_MARKER, META_SEPARATOR
from .entries import Category, ContentEntry
from .index import ContentIndex


@dataclass(frozen=True)
class CardItem:
    title: str
    description: str
    href: str
    meta: str = ""
    thumbnail: Optional[str] = None


def _post_meta(entry: ContentEntry) -> str:
    if entry.tags:
        return f"{entry.date}{META_SEPARATOR}{entry.tags[0]}"
    return entry.date


def _project_meta(entry: ContentEntry) -> str:
    return FEATURED_MARKER if entry.featured else entry.date


def to_card(entry: ContentEntry) -> CardItem:
    meta = (
        _project_meta(entry)
        if entry.category is Category.PROJECT
        else _post_meta(entry)
    )
    return CardItem(
        title=entry.title,
        description=entry.summary,
        href=entry.href,
        meta=meta,
        thumbnail=entry.thumbnail,
    )


def recent_posts(index: ContentIndex, n: int = DEFAULT_LIMIT) -> List[CardItem]:
    return [to_card(p) for p in index.list(Category.POST)[: max(n, 0)]]


def highlighted_projects(
    index: ContentIndex, n: int = DEFAULT_LIMIT
) -> List[CardItem]:
    return [to_card(p) for p in index.list(Category.PROJECT)[: max(n, 0)]]
