from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import requests

from .converters.export import Block, export_blocks, export_filename
from .converters.markup import render_html
from .llm.base import BaseLLM
from .llm.errors import GenerationError
from .prompts.blog import (
    DEFAULT_AUDIENCE,
    DEFAULT_TONE,
    DEFAULT_WORD_COUNT,
    build_prompt,
)

FAILURE_MESSAGE = "Something went wrong. Please check your API key or try again later."


@dataclass(frozen=True)
class BlogRequest:
    topic: str
    tone: str = DEFAULT_TONE
    audience: str = DEFAULT_AUDIENCE
    word_count: int = DEFAULT_WORD_COUNT

    def prompt(self) -> str:
        return build_prompt(self.topic, self.tone, self.audience, self.word_count)


@dataclass(frozen=True)
class GeneratedDocument:
    """
    The raw response text of one generation.

    ``html`` and ``blocks`` are views derived from ``text`` on every access and
    are never stored. ``error`` holds the failure detail when ``text`` is the
    fixed failure message.
    """
    topic: str
    text: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def html(self) -> str:
        return render_html(self.text)

    @property
    def blocks(self) -> List[Block]:
        return export_blocks(self.text)

    @property
    def filename(self) -> str:
        return export_filename(self.topic)


def generate_document(llm: BaseLLM, request: BlogRequest) -> GeneratedDocument:
    """
    Issue exactly one generation call for ``request``.

    Raises EmptyTopic (before any call) for a blank topic. Any failure of the
    call itself is replaced by FAILURE_MESSAGE; nothing is retried.
    """
    prompt = request.prompt()
    try:
        text = llm.generate(prompt)
    except (GenerationError, requests.RequestException, ValueError) as e:
        detail = f"{type(e).__name__}: {e}".rstrip(": ")
        return GeneratedDocument(topic=request.topic, text=FAILURE_MESSAGE, error=detail)
    return GeneratedDocument(topic=request.topic, text=text)
