"""Tk file dialog adapter for Linux, Windows and macOS without AppKit."""

from __future__ import annotations

import logging

from docpick.platform.base import ChooserUnavailableError

try:
    import tkinter
    from tkinter import filedialog

    HAS_TK = True
except ImportError:
    HAS_TK = False

LOG = logging.getLogger("docpick")


class TkFileChooser:
    """Shows ``askopenfilename`` from a hidden, throwaway Tk root."""

    def choose_file(self, title, filter_name, extensions, initial_dir=None):
        if not HAS_TK:
            raise ChooserUnavailableError("tkinter is not available")

        patterns = " ".join(f"*.{ext}" for ext in extensions)
        root = tkinter.Tk()
        try:
            root.withdraw()
            root.attributes("-topmost", True)
            path = filedialog.askopenfilename(
                parent=root,
                title=title,
                initialdir=initial_dir or None,
                filetypes=[(filter_name, patterns), ("All Files", "*")],
            )
        finally:
            root.destroy()

        # Cancel yields "" or () depending on the Tk version.
        if not path:
            return None
        LOG.debug(f"Tk chooser selected {path}")
        return str(path)
