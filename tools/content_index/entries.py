from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .config import DEFAULT_ORDER
from .errors import InvalidNumericField
from .utils import date_string, yaml_frontmatter_block

logger = logging.getLogger(__name__)

Number = Union[int, float]

_FALSE_STRINGS = {"", "false", "no", "off", "0"}


class Category(Enum):
    POST = "post"
    PROJECT = "project"

    @property
    def href_prefix(self) -> str:
        return "/blog" if self is Category.POST else "/projects"


@dataclass(frozen=True)
class ContentEntry:
    identifier: str
    category: Category
    title: str
    date: str = ""
    tags: Tuple[str, ...] = ()
    summary: str = ""
    thumbnail: Optional[str] = None
    featured: bool = False
    order: Optional[Number] = None
    github: Optional[str] = None
    demo: Optional[str] = None
    paper: Optional[str] = None
    body: str = ""

    @property
    def effective_order(self) -> Number:
        return DEFAULT_ORDER if self.order is None else self.order

    @property
    def href(self) -> str:
        return f"{self.category.href_prefix}/{self.identifier}"


def _optional_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _as_str(v: Any, default: str = "") -> str:
    if v is None:
        return default
    return str(v)


def _as_tags(v: Any) -> Tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, (list, tuple)):
        tags = (str(t).strip() for t in v if t is not None)
        return tuple(t for t in tags if t)
    s = str(v).strip()
    return (s,) if s else ()


def _as_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() not in _FALSE_STRINGS
    return bool(v)


def coerce_order(v: Any) -> Optional[Number]:
    """
    Numbers pass through, absent values stay None and anything else is
    converted with float(). Raises InvalidNumericField when that fails.
    """
    if v is None or v == "":
        return None
    if isinstance(v, bool):
        raise InvalidNumericField("order", v)
    if isinstance(v, (int, float)):
        n = v
    else:
        try:
            n = float(str(v).strip())
        except ValueError as e:
            raise InvalidNumericField("order", v) from e
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            raise InvalidNumericField("order", v)
        if n.is_integer():
            return int(n)
    return n


def coerce_entry(
    category: Category,
    identifier: str,
    fm: Optional[Dict[str, Any]],
    body: str,
) -> ContentEntry:
    """Map untyped front matter onto a ContentEntry, applying defaults."""
    fm = fm or {}
    common = dict(
        identifier=identifier,
        category=category,
        title=_as_str(fm.get("title"), identifier),
        date=date_string(fm.get("date")),
        tags=_as_tags(fm.get("tags")),
        summary=_as_str(fm.get("summary")),
        thumbnail=_optional_str(fm.get("thumbnail")),
        body=body,
    )
    if category is not Category.PROJECT:
        return ContentEntry(**common)

    try:
        order = coerce_order(fm.get("order"))
    except InvalidNumericField as e:
        logger.warning("%s/%s: ignoring order (%s)", category.value, identifier, e)
        order = None

    return ContentEntry(
        **common,
        featured=_as_bool(fm.get("featured", False)),
        order=order,
        github=_optional_str(fm.get("github")),
        demo=_optional_str(fm.get("demo")),
        paper=_optional_str(fm.get("paper")),
    )


def to_frontmatter(entry: ContentEntry) -> Dict[str, Any]:
    fm: Dict[str, Any] = {"title": entry.title}
    if entry.date:
        fm["date"] = entry.date
    if entry.tags:
        fm["tags"] = list(entry.tags)
    if entry.summary:
        fm["summary"] = entry.summary
    if entry.thumbnail:
        fm["thumbnail"] = entry.thumbnail
    if entry.category is Category.PROJECT:
        fm["featured"] = entry.featured
        if entry.order is not None:
            fm["order"] = entry.order
        for key in ("github", "demo", "paper"):
            value = getattr(entry, key)
            if value:
                fm[key] = value
    return fm


def render_file(entry: ContentEntry) -> str:
    return yaml_frontmatter_block(to_frontmatter(entry)) + entry.body
