#!/usr/bin/env python3
"""
Content index for the site's blog posts and projects.

- Posts -> content/blog/<slug>.mdx
  frontmatter: title, date, tags, summary, thumbnail?
- Projects -> content/projects/<slug>.mdx
  frontmatter: title, date, tags, summary, thumbnail?, featured, order?,
  github?, demo?, paper?

Commands:
- list {post,project}: ordered listing, one line per entry
- get {post,project} SLUG: front matter and body (or HTML with --html)
- recent / highlighted: the home page cards
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import List, Optional

import yaml

from .config import CONFIG_FILE_NAME, DEFAULT_LIMIT, ContentRoots, load_roots
from .entries import ContentEntry, render_file, to_frontmatter
from .errors import ContentError
from .index import ContentIndex
from .utils import yaml_frontmatter_block
from .views import CardItem, highlighted_projects, recent_posts


def resolve_roots(
    root: Optional[str], config: Optional[str]
) -> ContentRoots:
    if config:
        return load_roots(pathlib.Path(config))
    base = pathlib.Path(root) if root else pathlib.Path.cwd()
    default_config = base / CONFIG_FILE_NAME
    if default_config.exists():
        return load_roots(default_config)
    return ContentRoots.from_base(base)


def _entry_line(entry: ContentEntry) -> str:
    flags = []
    if entry.featured:
        flags.append("*")
    if entry.order is not None:
        flags.append(f"#{entry.order}")
    prefix = " ".join(flags)
    date = entry.date or "----------"
    return f"{date}  {entry.identifier}  {prefix + ' ' if prefix else ''}{entry.title}"


def _card_line(card: CardItem) -> str:
    return f"{card.href}  {card.title}  [{card.meta}]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-index", description="List and inspect site content."
    )
    parser.add_argument("--root", help="site directory holding content/")
    parser.add_argument("--config", help=f"YAML config (default: ./{CONFIG_FILE_NAME})")
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="ordered listing of a category")
    p_list.add_argument("category", choices=["post", "project"])

    p_get = sub.add_parser("get", help="show a single entry")
    p_get.add_argument("category", choices=["post", "project"])
    p_get.add_argument("identifier")
    p_get.add_argument("--html", action="store_true", help="render the body")

    for name, help_text in (
        ("recent", "most recent posts"),
        ("highlighted", "highlighted projects"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("-n", type=int, default=DEFAULT_LIMIT)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        index = ContentIndex(resolve_roots(args.root, args.config))
        if args.command == "list":
            for entry in index.list(args.category):
                print(_entry_line(entry))
        elif args.command == "get":
            entry = index.get(args.category, args.identifier)
            if args.html:
                print(yaml_frontmatter_block(to_frontmatter(entry)), end="")
                print(index.render(entry))
            else:
                print(render_file(entry), end="")
        elif args.command == "recent":
            for card in recent_posts(index, args.n):
                print(_card_line(card))
        elif args.command == "highlighted":
            for card in highlighted_projects(index, args.n):
                print(_card_line(card))
    except (ContentError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
