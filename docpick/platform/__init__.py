"""Platform adapters and host selection."""

from __future__ import annotations

import logging
import sys

from docpick.platform.base import ChooserUnavailableError, ClipboardOutput, FileChooser, UiShell

LOG = logging.getLogger("docpick")


def default_file_chooser() -> FileChooser:
    """Return the native chooser for the running host."""
    if sys.platform == "darwin":
        from docpick.platform.macos.chooser import HAS_APPKIT, MacOSFileChooser

        if HAS_APPKIT:
            return MacOSFileChooser()
        LOG.warning("AppKit not importable, falling back to the Tk file dialog")

    from docpick.platform.tk.chooser import TkFileChooser

    return TkFileChooser()


__all__ = [
    "ChooserUnavailableError",
    "ClipboardOutput",
    "FileChooser",
    "UiShell",
    "default_file_chooser",
]
