# blogwriter/utils/render.py
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel


def render_markdown(markdown_text: str, title: Optional[str] = None, *,
                    paged: bool = False, console: Optional[Console] = None) -> None:
    """
    Print the generated text to the terminal with a header panel.
    With ``paged`` the output goes through Rich's pager so long posts are scrollable.
    """
    console = console or Console()

    def _print():
        if title:
            console.print(Panel.fit(f"[bold]{title}[/bold]"))
        console.print(Markdown(markdown_text))

    if paged:
        with console.pager(styles=True):
            _print()
    else:
        _print()
