from __future__ import annotations

import pathlib
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml

FRONTMATTER_MARKER = "---"


def read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def date_string(v: Any) -> str:
    """Render a front matter date as a plain YYYY-MM-DD string."""
    if v is None:
        return ""
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    return str(v).strip().strip('"').strip("'")


def yaml_frontmatter_block(data: Dict[str, Any]) -> str:
    """Dump `data` as a front matter block. Date strings stay strings."""
    dumped = yaml.safe_dump(
        data, sort_keys=False, allow_unicode=True
    ).rstrip()
    return f"---\n{dumped}\n---\n\n"


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """
    Split normalized text into (front matter source, body).

    The block must open on the first non-blank line and close on the next
    line that is exactly `---`. Without either marker the whole text is
    body and the front matter is None.
    """
    lines = text.splitlines(keepends=True)
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start >= len(lines) or lines[start].rstrip("\n") != FRONTMATTER_MARKER:
        return None, text

    for i in range(start + 1, len(lines)):
        if lines[i].rstrip("\n") == FRONTMATTER_MARKER:
            fm_text = "".join(lines[start + 1 : i])
            body = "".join(lines[i + 1 :])
            return fm_text, body
    return None, text


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    """
    Parse the YAML block of `text`. Raises yaml.YAMLError on bad YAML and
    TypeError when the block is not a mapping.
    """
    fm_text, body = split_frontmatter(text)
    if fm_text is None:
        return None, body
    fm = yaml.safe_load(fm_text)
    if fm is None:
        return {}, body
    if not isinstance(fm, dict):
        raise TypeError(
            f"front matter must be a mapping, got {type(fm).__name__}"
        )
    return fm, body
