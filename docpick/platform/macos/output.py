"""macOS notification adapter."""

from __future__ import annotations

import logging
import subprocess

LOG = logging.getLogger("docpick")


def escape_applescript_string(text):
    """Escape text for safe inclusion in AppleScript string literals."""
    return str(text).replace("\\", "\\\\").replace('"', '\\"')


def show_notification(title, message, sound=False):
    """Show a macOS notification through osascript."""
    escaped_title = escape_applescript_string(str(title).replace("\n", " "))
    escaped_message = escape_applescript_string(str(message).replace("\n", " "))
    sound_clause = ' sound name "default"' if sound else ""
    script = f'''
    display notification "{escaped_message}" with title "{escaped_title}"{sound_clause}
    '''
    try:
        subprocess.run(["osascript", "-e", script], capture_output=True, timeout=2)
        return True
    except Exception as exc:
        LOG.debug(f"Failed to show notification: {exc}")
        return False
