#!/usr/bin/env python3
from __future__ import annotations

import pathlib
import re
from dataclasses import dataclass

from .utils import read_yaml

# ---------- Paths

BLOG_DIR_NAME = "content/blog"
PROJECTS_DIR_NAME = "content/projects"
CONFIG_FILE_NAME = "content-index.yml"

# ---------- Config

CONTENT_SUFFIX = ".mdx"
DEFAULT_ORDER = 9999
FEATURED_MARKER = "Featured Project"
META_SEPARATOR = " · "
DEFAULT_LIMIT = 4

# MDX syntax recognized by the default renderer

FENCE_OPEN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
ESM_START = re.compile(r"^(import|export)\s")
JSX_LINE = re.compile(r"^\s*<\/?[A-Z][\w.]*(\s|/?>|$)")
JSX_COMMENT = re.compile(r"\{\s*/\*.*?\*/\s*\}", re.DOTALL)


@dataclass(frozen=True)
class ContentRoots:
    """Where each category keeps its content files."""

    posts_root: pathlib.Path
    projects_root: pathlib.Path
    suffix: str = CONTENT_SUFFIX

    @classmethod
    def from_base(cls, base: pathlib.Path, suffix: str = CONTENT_SUFFIX) -> "ContentRoots":
        base = pathlib.Path(base)
        return cls(base / BLOG_DIR_NAME, base / PROJECTS_DIR_NAME, suffix)


def load_roots(path: pathlib.Path) -> ContentRoots:
    """
    Read a YAML config with `posts_root`, `projects_root` and optional
    `suffix`. Relative roots resolve against the config file's directory.
    Missing keys fall back to the default layout under that directory.
    """
    path = pathlib.Path(path)
    base = path.resolve().parent
    data = read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")

    defaults = ContentRoots.from_base(base)

    def _resolve(key: str, fallback: pathlib.Path) -> pathlib.Path:
        value = data.get(key)
        if not value:
            return fallback
        p = pathlib.Path(str(value)).expanduser()
        return p if p.is_absolute() else base / p

    return ContentRoots(
        posts_root=_resolve("posts_root", defaults.posts_root),
        projects_root=_resolve("projects_root", defaults.projects_root),
        suffix=str(data.get("suffix") or CONTENT_SUFFIX),
    )
