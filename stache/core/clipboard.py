"""
Clipboard export of the link plan.
"""
from __future__ import annotations

import logging

import pyperclip

LOGGER = logging.getLogger(__name__)

_STATE = {"text": ""}


def clear_clipboard() -> None:
    """Clear internal clipboard text."""
    _STATE["text"] = ""


def last_copied() -> str:
    """Return the text most recently passed to copy_text()."""
    return _STATE["text"]


def copy_text(text: str) -> bool:
    """Remember text and mirror it to the system clipboard.

    Returns False when no system clipboard backend is usable; the text is
    still kept internally.
    """
    _STATE["text"] = text or ""
    try:
        pyperclip.copy(_STATE["text"])
    except pyperclip.PyperclipException:
        LOGGER.debug("system clipboard unavailable", exc_info=True)
        return False
    return True
