"""Tk platform adapter implementations."""

from docpick.platform.tk.chooser import HAS_TK, TkFileChooser

__all__ = ["TkFileChooser", "HAS_TK"]
