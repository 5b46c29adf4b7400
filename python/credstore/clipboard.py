"""Clipboard copy via pyperclip."""

from __future__ import annotations

import pyperclip


class ClipboardError(RuntimeError):
    """No usable clipboard mechanism (e.g. headless Linux without xclip)."""


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc)) from exc
