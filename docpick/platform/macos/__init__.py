"""macOS platform adapter implementations."""

from docpick.platform.macos.chooser import HAS_APPKIT, MacOSFileChooser
from docpick.platform.macos.output import escape_applescript_string, show_notification

__all__ = [
    "MacOSFileChooser",
    "HAS_APPKIT",
    "escape_applescript_string",
    "show_notification",
]
