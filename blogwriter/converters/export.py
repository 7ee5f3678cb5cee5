from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, NamedTuple

from docx import Document

_NEWLINES_RE = re.compile(r"[\r\n]+")
_UNSAFE_FILENAME_RE = re.compile(r"[\\/]")

# longest marker first
HEADING_MARKERS = (("### ", 3), ("## ", 2), ("# ", 1))

FILENAME_TOPIC_CHARS = 30


class Block(NamedTuple):
    level: int  # 0 = body text, 1..3 = heading level
    text: str


def classify_block(segment: str) -> Block:
    for marker, level in HEADING_MARKERS:
        if segment.startswith(marker):
            return Block(level, segment[len(marker):])
    return Block(0, segment)


def export_blocks(text: str) -> List[Block]:
    """
    Split response text into export blocks, one per non-blank line.

    Lines of one source paragraph are NOT merged; each becomes its own block.
    """
    if not text:
        return []
    return [classify_block(seg) for seg in _NEWLINES_RE.split(text) if seg.strip()]


def export_filename(topic: str) -> str:
    stem = _UNSAFE_FILENAME_RE.sub("-", (topic or "")[:FILENAME_TOPIC_CHARS])
    return f"{stem}-blog.docx"


def build_document(blocks: Iterable[Block]):
    """Flat sequence of paragraphs: Heading 1..3 styles for headings, Normal for body."""
    doc = Document()
    for block in blocks:
        if block.level:
            doc.add_heading(block.text, level=block.level)
        else:
            doc.add_paragraph(block.text)
    return doc


def write_docx(text: str, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    build_document(export_blocks(text)).save(str(out))
    return out
