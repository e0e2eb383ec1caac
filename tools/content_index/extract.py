from __future__ import annotations

import pathlib
from typing import Union

import yaml

from .config import ContentRoots
from .entries import Category, ContentEntry, coerce_entry
from .errors import MalformedContent, NotFound
from .utils import _norm_text, parse_frontmatter


def category_dir(roots: ContentRoots, category: Category) -> pathlib.Path:
    if category is Category.POST:
        return roots.posts_root
    return roots.projects_root


def content_path(
    roots: ContentRoots, category: Category, identifier: str
) -> pathlib.Path:
    return category_dir(roots, category) / f"{identifier}{roots.suffix}"


def _is_plain_identifier(identifier: str) -> bool:
    return bool(identifier) and not (
        identifier.startswith(".")
        or "/" in identifier
        or "\\" in identifier
    )


def read_entry(
    path: pathlib.Path, category: Category, identifier: str
) -> ContentEntry:
    try:
        text = _norm_text(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise MalformedContent(path, f"not valid UTF-8 ({e.reason})") from e

    try:
        fm, body = parse_frontmatter(text)
    except yaml.YAMLError as e:
        raise MalformedContent(path, f"bad front matter: {e}") from e
    except TypeError as e:
        raise MalformedContent(path, str(e)) from e

    return coerce_entry(category, identifier, fm, body)


def extract(
    roots: ContentRoots,
    category: Union[Category, str],
    identifier: str,
) -> ContentEntry:
    """
    Read the content file backing `identifier` and return its entry.

    Raises NotFound when there is no such file and MalformedContent when
    the front matter cannot be parsed.
    """
    category = Category(category)
    if not _is_plain_identifier(identifier):
        raise NotFound(category.value, identifier)

    path = content_path(roots, category, identifier)
    if not path.is_file():
        raise NotFound(category.value, identifier)
    return read_entry(path, category, identifier)
