"""Clipboard output backed by pyperclip."""

from __future__ import annotations

import logging

import pyperclip

LOG = logging.getLogger("docpick")


class PyperclipClipboard:
    """ClipboardOutput implementation for any platform pyperclip supports."""

    def copy_text(self, text):
        """Copy text to the clipboard."""
        try:
            pyperclip.copy(text)
            return True
        except pyperclip.PyperclipException as exc:
            LOG.debug(f"copy_text failed: {exc}")
            return False
