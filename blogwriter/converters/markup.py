"""
Markdown-ish text -> HTML fragment for display.

Handles only what the generator is asked to produce: ``#``/``##``/``###``
headings, ``**bold**`` and ``*italic*`` spans, ``* `` bullets and ``1. `` numbered
items, and plain paragraphs. Anything else degrades to a paragraph.

Every line is classified exactly once (Heading / ListItem / Paragraph / Blank)
and the HTML is produced in a single pass over those lines. List items carry
their marker kind, so a bullet run and a numbered run are wrapped in ``<ul>``
and ``<ol>`` respectively even when they sit next to each other.
"""
from __future__ import annotations

import html
import re
from typing import Iterator, NamedTuple, Union

UNORDERED = "unordered"
ORDERED = "ordered"

HEADING_CLASSES = {
    1: "text-2xl sm:text-3xl font-bold mt-6 mb-4 text-slate-800",
    2: "text-xl sm:text-2xl font-bold mt-5 mb-3 text-slate-800",
    3: "text-lg sm:text-xl font-bold mt-4 mb-2 text-slate-700",
}
PARAGRAPH_CLASS = "mb-4"
LIST_ITEM_CLASS = "ml-4"
LIST_TAGS = {
    UNORDERED: ("ul", "list-disc ml-6 mb-4"),
    ORDERED: ("ol", "list-decimal ml-6 mb-4"),
}

# greedy #{1,3} + mandatory space: "### x" is level 3, never level 1
_HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
_BULLET_RE = re.compile(r"^\s*\*\s+(.+)$")
_NUMBERED_RE = re.compile(r"^\s*\d+\.\s+(.+)$")

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
# "<" only as a whole <strong>...</strong>: an italic span may wrap a bold one, never straddle it
_ITALIC_RE = re.compile(r"\*((?:[^*<]|<strong>[^<]*</strong>)+?)\*")


class Heading(NamedTuple):
    level: int
    text: str


class ListItem(NamedTuple):
    kind: str
    text: str


class Paragraph(NamedTuple):
    text: str


class Blank(NamedTuple):
    pass


Line = Union[Heading, ListItem, Paragraph, Blank]


def classify_line(line: str) -> Line:
    if not line.strip():
        return Blank()

    m = _HEADING_RE.match(line)
    if m:
        content = m.group(2).strip()
        if not content:
            return Blank()
        return Heading(len(m.group(1)), content)

    m = _BULLET_RE.match(line)
    if m:
        return ListItem(UNORDERED, m.group(1).strip())

    m = _NUMBERED_RE.match(line)
    if m:
        return ListItem(ORDERED, m.group(1).strip())

    return Paragraph(line.strip())


def classify_lines(text: str) -> Iterator[Line]:
    for line in text.splitlines():
        yield classify_line(line)


def render_inline(text: str) -> str:
    """Escape text, then apply bold before italic."""
    out = html.escape(text, quote=False)
    out = _BOLD_RE.sub(r"<strong>\1</strong>", out)
    out = _ITALIC_RE.sub(r"<em>\1</em>", out)
    return out


def render_html(text: str) -> str:
    """Render response text as an HTML fragment. Never raises; empty in, empty out."""
    if not text:
        return ""

    parts: list[str] = []
    open_list: str | None = None

    def close_list() -> None:
        nonlocal open_list
        if open_list:
            parts.append(f"</{LIST_TAGS[open_list][0]}>")
            open_list = None

    for line in classify_lines(text):
        if isinstance(line, Blank):
            # blank lines between items keep the list open
            continue

        if isinstance(line, ListItem):
            if open_list != line.kind:
                close_list()
                tag, css = LIST_TAGS[line.kind]
                parts.append(f'<{tag} class="{css}">')
                open_list = line.kind
            parts.append(f'<li class="{LIST_ITEM_CLASS}">{render_inline(line.text)}</li>')
            continue

        close_list()
        if isinstance(line, Heading):
            css = HEADING_CLASSES[line.level]
            parts.append(f'<h{line.level} class="{css}">{render_inline(line.text)}</h{line.level}>')
        else:
            parts.append(f'<p class="{PARAGRAPH_CLASS}">{render_inline(line.text)}</p>')

    close_list()
    return "\n".join(parts)
