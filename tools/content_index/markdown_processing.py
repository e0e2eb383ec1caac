from __future__ import annotations

from typing import Callable, List

from nbconvert.filters.markdown_mistune import markdown2html_mistune

from .config import ESM_START, FENCE_OPEN, JSX_COMMENT, JSX_LINE

Lines = List[str]


def _closes(line: str, fence: str) -> bool:
    s = line.strip()
    return len(s) >= len(fence) and set(s) == {fence[0]}


def map_prose(lines: Lines, fn: Callable[[Lines], Lines]) -> Lines:
    """Apply `fn` to each run of lines outside ``` / ~~~ code fences."""
    out: Lines = []
    prose: Lines = []
    fence = None
    for line in lines:
        if fence is not None:
            out.append(line)
            if _closes(line, fence):
                fence = None
            continue
        m = FENCE_OPEN.match(line)
        if m:
            if prose:
                out.extend(fn(prose))
            prose = []
            fence = m.group("fence")
            out.append(line)
        else:
            prose.append(line)
    if prose:
        out.extend(fn(prose))
    return out


def strip_esm(lines: Lines) -> Lines:
    """
    Drop MDX `import`/`export` blocks. A block starts a paragraph and runs
    until the next blank line.
    """
    out: Lines = []
    in_esm = False
    for line in lines:
        if in_esm:
            if not line.strip():
                in_esm = False
                out.append(line)
            continue
        if ESM_START.match(line) and (not out or not out[-1].strip()):
            in_esm = True
            continue
        out.append(line)
    return out


def isolate_jsx(lines: Lines) -> Lines:
    """Surround component tag lines (`<Figure ...>`) with blank lines."""
    out: Lines = []
    for i, line in enumerate(lines):
        if not JSX_LINE.match(line):
            out.append(line)
            continue
        if out and out[-1].strip() and not JSX_LINE.match(out[-1]):
            out.append("")
        out.append(line)
        nxt = lines[i + 1] if i + 1 < len(lines) else ""
        if nxt.strip() and not JSX_LINE.match(nxt):
            out.append("")
    return out


def prepare_mdx(prose: Lines) -> Lines:
    text = JSX_COMMENT.sub("", "\n".join(prose))
    return isolate_jsx(strip_esm(text.split("\n")))


def render_markdown(body: str) -> str:
    """Default renderer: MDX body to an HTML fragment."""
    lines = map_prose(body.split("\n"), prepare_mdx)
    return markdown2html_mistune("\n".join(lines))
