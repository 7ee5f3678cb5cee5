# blogwriter/commands/generate.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import click

from ..converters.export import write_docx
from ..llm.factory import pick_llm
from ..prompts.blog import (
    DEFAULT_AUDIENCE,
    DEFAULT_TONE,
    DEFAULT_WORD_COUNT,
    TONES,
)
from ..utils.clipboard import ClipboardUnavailable, copy_text
from ..utils.config import API_KEY_ENV, resolve_api_key, resolve_default, resolve_word_count
from ..utils.log import debug, info, success, warn
from ..utils.render import render_markdown
from ..writer import BlogRequest, GeneratedDocument, generate_document


def ask_topic(topic: Optional[str]) -> str:
    """Keep asking until the topic is non-blank; no request is made without one."""
    while not topic or not topic.strip():
        topic = click.prompt("Blog topic", default="", show_default=False)
    return topic.strip()


def save_outputs(ctx, doc: GeneratedDocument, *, html_file: Optional[str], docx: bool,
                 out_dir: str, copy: bool) -> Dict[str, Any]:
    """Write/copy the requested artifacts for a finished document. Returns what was written."""
    written: Dict[str, Any] = {}
    if html_file:
        out = Path(html_file)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(doc.html, encoding="utf-8")
        success(ctx, f"Wrote {out}")
        written["html_file"] = str(out)
    if docx:
        try:
            out = write_docx(doc.text, Path(out_dir) / doc.filename)
        except OSError as e:
            raise click.ClickException(f"Could not write document: {e}")
        success(ctx, f"Wrote {out}")
        written["docx_file"] = str(out)
    if copy:
        try:
            copy_text(doc.text)
            success(ctx, "Copied to clipboard.")
            written["copied"] = True
        except ClipboardUnavailable as e:
            warn(ctx, str(e))
            written["copied"] = False
    return written


@click.command(name="generate")
@click.option('--topic', default=None, help='Blog topic (asked for when omitted)')
@click.option('--tone', type=click.Choice(TONES, case_sensitive=False), default=None,
              help=f'Content tone [default: profile tone or {DEFAULT_TONE}]')
@click.option('--audience', default=None,
              help=f'Target audience [default: profile audience or "{DEFAULT_AUDIENCE}"]')
@click.option('--word-count', type=click.IntRange(min=1), default=None,
              help=f'Approximate length in words [default: profile word_count or {DEFAULT_WORD_COUNT}]')
@click.option('--api-key', envvar=API_KEY_ENV, default=None, show_envvar=True,
              help='Generative API key (prefer the environment variable)')
@click.option('--html-file', type=click.Path(dir_okay=False), default=None,
              help='Also write the rendered HTML fragment here')
@click.option('--docx/--no-docx', default=False, help='Export a .docx named after the topic')
@click.option('--out-dir', type=click.Path(file_okay=False), default=None,
              help='Directory for the .docx export [default: profile out_dir or .]')
@click.option('--copy', is_flag=True, help='Copy the raw generated text to the clipboard')
@click.option('--show/--no-show', default=True, help='Preview the result in the terminal')
@click.option('--pager', is_flag=True, help='Page the terminal preview')
@click.pass_context
def generate(ctx, topic, tone, audience, word_count, api_key, html_file, docx, out_dir,
             copy, show, pager):
    """
    Generate an SEO-optimized blog post with one API call, then preview,
    export or copy it.
    """
    obj = ctx.obj or {}
    cfg: Dict[str, Any] = obj.get("config", {})

    topic = ask_topic(topic)
    request = BlogRequest(
        topic=topic,
        tone=resolve_default("tone", tone, cfg, DEFAULT_TONE),
        audience=resolve_default("audience", audience, cfg, DEFAULT_AUDIENCE),
        word_count=resolve_word_count(word_count, cfg, DEFAULT_WORD_COUNT),
    )
    out_dir = resolve_default("out_dir", out_dir, cfg, ".")

    llm = pick_llm(cfg, api_key=resolve_api_key(api_key, cfg))
    debug(ctx, f"Model: {llm.model}  tone={request.tone}  audience={request.audience}  "
               f"words={request.word_count}")
    info(ctx, "Creating your content... (this typically takes 15-30 seconds)")

    doc = generate_document(llm, request)
    if not doc.ok:
        warn(ctx, doc.text)
        debug(ctx, f"Generation error: {doc.error}")

    written = save_outputs(ctx, doc, html_file=html_file if doc.ok else None, docx=docx and doc.ok,
                           out_dir=out_dir, copy=copy and doc.ok)

    if obj.get("json"):
        click.echo(json.dumps({
            "topic": doc.topic,
            "ok": doc.ok,
            "error": doc.error,
            "text": doc.text,
            "html": doc.html,
            "blocks": [{"level": b.level, "text": b.text} for b in doc.blocks],
            **written,
        }, indent=2, ensure_ascii=False))
    elif show and doc.ok:
        render_markdown(doc.text, title=doc.topic, paged=pager)

    if not doc.ok:
        ctx.exit(1)
