from __future__ import annotations

import pyperclip


class ClipboardUnavailable(RuntimeError):
    pass


def copy_text(text: str) -> None:
    """Copy text verbatim to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(
            "No clipboard mechanism found (on Linux install xclip, xsel or wl-clipboard)."
        ) from e
