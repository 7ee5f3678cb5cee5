# blogwriter/commands/studio.py
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import ConditionalContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.shortcuts import input_dialog
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

from ..converters.export import write_docx
from ..llm.factory import pick_llm
from ..prompts.blog import (
    DEFAULT_AUDIENCE,
    DEFAULT_TONE,
    DEFAULT_WORD_COUNT,
    TONES,
    WORD_COUNT_MAX,
    WORD_COUNT_MIN,
    WORD_COUNT_STEP,
)
from ..utils.clipboard import ClipboardUnavailable, copy_text
from ..utils.config import API_KEY_ENV, resolve_api_key, resolve_default, resolve_word_count
from ..writer import BlogRequest, GeneratedDocument, generate_document

SETTINGS_TAB = "settings"
OUTPUT_TAB = "output"


class StudioState:
    """Form values and view state of the studio. One document, one request at a time."""

    def __init__(self, topic: str = "", tone: str = DEFAULT_TONE,
                 audience: str = DEFAULT_AUDIENCE, word_count: int = DEFAULT_WORD_COUNT):
        self.topic = topic
        self.tone = tone if tone in TONES else DEFAULT_TONE
        self.audience = audience
        self.word_count = word_count
        self.tab = SETTINGS_TAB
        self.loading = False
        self.document: Optional[GeneratedDocument] = None

    def toggle_tab(self) -> None:
        self.tab = OUTPUT_TAB if self.tab == SETTINGS_TAB else SETTINGS_TAB

    def cycle_tone(self, step: int = 1) -> None:
        i = TONES.index(self.tone)
        self.tone = TONES[(i + step) % len(TONES)]

    def nudge_word_count(self, steps: int) -> None:
        value = self.word_count + steps * WORD_COUNT_STEP
        self.word_count = max(WORD_COUNT_MIN, min(WORD_COUNT_MAX, value))

    def has_topic(self) -> bool:
        return bool(self.topic.strip())

    def can_generate(self) -> bool:
        return not self.loading

    def has_result(self) -> bool:
        return self.document is not None and not self.loading

    def begin(self) -> BlogRequest:
        """Switch to the output tab in loading state and return the request to send."""
        self.loading = True
        self.tab = OUTPUT_TAB
        return BlogRequest(self.topic.strip(), self.tone, self.audience, self.word_count)

    def finish(self, document: GeneratedDocument) -> None:
        self.document = document
        self.loading = False

    def output_text(self) -> str:
        if self.loading:
            return "Creating your premium content...\nThis typically takes 15-30 seconds."
        if self.document is None:
            return "Your generated content will appear here.\nPress Tab to go back to settings."
        return self.document.text


@click.command(name="studio")
@click.option('--topic', default="", help='Initial topic')
@click.option('--api-key', envvar=API_KEY_ENV, default=None, show_envvar=True,
              help='Generative API key (prefer the environment variable)')
@click.option('--out-dir', type=click.Path(file_okay=False), default=None,
              help='Directory for downloads [default: profile out_dir or .]')
@click.pass_context
def studio(ctx, topic, api_key, out_dir):
    """
    Interactive two-tab writer:
      Tab   Switch between Content Settings and Generated Content
      t     Edit topic
      o/O   Next/previous tone
      a     Edit audience
      +/-   Word count up/down by 100 (500-2000)
      g     Generate
      c     Copy raw text to clipboard
      d     Download as .docx
      h     Save rendered HTML
      q     Quit
    """
    obj = ctx.obj or {}
    cfg: Dict[str, Any] = obj.get("config", {})
    llm = pick_llm(cfg, api_key=resolve_api_key(api_key, cfg))
    out_dir = Path(resolve_default("out_dir", out_dir, cfg, "."))

    state = StudioState(
        topic=topic or "",
        tone=resolve_default("tone", None, cfg, DEFAULT_TONE),
        audience=resolve_default("audience", None, cfg, DEFAULT_AUDIENCE),
        word_count=resolve_word_count(None, cfg, DEFAULT_WORD_COUNT),
    )
    app_holder: Dict[str, Any] = {"app": None}

    def status(txt: str):
        footer_control.text = [("class:footer", txt)]
        app = app_holder.get("app")
        if app is not None:
            app.invalidate()

    # ---- UI rendering ----
    def render_tabs() -> List[tuple[str, str]]:
        rows: List[tuple[str, str]] = []
        for tab, label in ((SETTINGS_TAB, "Content Settings"), (OUTPUT_TAB, "Generated Content")):
            style = "class:tab.active" if state.tab == tab else "class:tab"
            rows.append((style, f"  {label}  "))
            rows.append(("", " "))
        return rows

    def render_settings() -> List[tuple[str, str]]:
        topic_text = state.topic or "(required) e.g. 10 Essential Digital Marketing Strategies for 2025"
        topic_style = "" if state.has_topic() else "class:dim"
        return [
            ("class:heading", "Generate Your Blog Content\n\n"),
            ("class:label", "Blog Topic*     "), (topic_style, f"{topic_text}\n"),
            ("class:label", "Content Tone    "), ("", f"{state.tone}\n"),
            ("class:label", "Target Audience "), ("", f"{state.audience}\n"),
            ("class:label", "Word Count      "), ("", f"{state.word_count}  "
                                                     f"({WORD_COUNT_MIN}-{WORD_COUNT_MAX})\n"),
            ("", "\n"),
            ("class:dim", "Press g to generate."),
        ]

    tabs_window = Window(content=FormattedTextControl(text=render_tabs), height=1)
    settings_window = Window(content=FormattedTextControl(text=render_settings), wrap_lines=True,
                             always_hide_cursor=True)
    output_area = TextArea(text=state.output_text(), read_only=True, scrollbar=True, wrap_lines=True)

    on_settings = Condition(lambda: state.tab == SETTINGS_TAB)
    on_output = Condition(lambda: state.tab == OUTPUT_TAB)

    help_text = TextArea(
        text=(
            "Tab switch • t topic • o/O tone • a audience • +/- words • g generate • "
            "c copy • d docx • h html • q quit"
        ),
        style="class:help",
        height=1,
        read_only=True,
    )
    footer_control = FormattedTextControl(text=[("class:footer", "")])
    footer_window = Window(content=footer_control, height=1)

    body = HSplit([
        ConditionalContainer(settings_window, filter=on_settings),
        ConditionalContainer(output_area, filter=on_output),
    ])
    root = HSplit([help_text, tabs_window, Frame(body, title="BlogWriter"), footer_window])
    layout = Layout(root)

    style = Style.from_dict({
        "tab": "fg:#888888",
        "tab.active": "reverse bold",
        "help": "fg:#888888",
        "footer": "fg:#00afff",
        "dim": "fg:#666666",
        "heading": "bold",
        "label": "bold",
    })

    def refresh_output():
        output_area.text = state.output_text()
        app = app_holder.get("app")
        if app is not None:
            app.invalidate()

    kb = KeyBindings()

    @kb.add("q")
    def _(event):
        event.app.exit()

    @kb.add("tab")
    def _(event):
        state.toggle_tab()
        event.app.layout.focus(output_area if state.tab == OUTPUT_TAB else help_text)

    def edit_topic(app, message: str = "Blog topic:"):
        async def ask():
            value = await input_dialog(title="Topic", text=message, default=state.topic).run_async()
            if value is not None:
                state.topic = value.strip()
            state.tab = SETTINGS_TAB
            app.layout.focus(help_text)
            app.invalidate()

        app.create_background_task(ask())

    @kb.add("t")
    def _(event):
        edit_topic(event.app)

    @kb.add("a")
    def _(event):
        async def ask():
            value = await input_dialog(title="Audience", text="Target audience:",
                                       default=state.audience).run_async()
            if value is not None and value.strip():
                state.audience = value.strip()
            event.app.invalidate()

        event.app.create_background_task(ask())

    @kb.add("o")
    def _(event):
        state.cycle_tone(1)

    @kb.add("O")
    def _(event):
        state.cycle_tone(-1)

    @kb.add("+")
    def _(event):
        state.nudge_word_count(1)

    @kb.add("-")
    def _(event):
        state.nudge_word_count(-1)

    @kb.add("g")
    def _(event):
        if not state.can_generate():
            status("A generation is already running.")
            return
        if not state.has_topic():
            status("A blog topic is required.")
            edit_topic(event.app, message="A blog topic is required:")
            return

        request = state.begin()
        refresh_output()
        event.app.layout.focus(output_area)
        status(f"Generating with {llm.model}...")

        async def run():
            loop = asyncio.get_running_loop()
            doc = await loop.run_in_executor(None, generate_document, llm, request)
            state.finish(doc)
            refresh_output()
            status("Done." if doc.ok else f"Failed: {doc.error}")

        event.app.create_background_task(run())

    @kb.add("c")
    def _(event):
        if not state.has_result():
            status("Nothing to copy yet.")
            return
        try:
            copy_text(state.document.text)
            status("Copied!")
        except ClipboardUnavailable as e:
            status(str(e))

    @kb.add("d")
    def _(event):
        if not state.has_result():
            status("Nothing to download yet.")
            return
        try:
            out = write_docx(state.document.text, out_dir / state.document.filename)
            status(f"Wrote {out}")
        except OSError as e:
            status(f"Download error: {e}")

    @kb.add("h")
    def _(event):
        if not state.has_result():
            status("Nothing to save yet.")
            return
        out = (out_dir / state.document.filename).with_suffix(".html")
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(state.document.html, encoding="utf-8")
            status(f"Wrote {out}")
        except OSError as e:
            status(f"Save error: {e}")

    status("Fill in the settings, then press g.")

    app = Application(layout=layout, key_bindings=kb, style=style, full_screen=True)
    app_holder["app"] = app
    app.run()
