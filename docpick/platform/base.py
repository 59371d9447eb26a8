"""Platform adapter interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from docpick.core.state import ImportState


class ChooserUnavailableError(RuntimeError):
    """Raised when no native file-selection surface can be presented."""


class FileChooser(Protocol):
    """Native file-selection dialog."""

    def choose_file(
        self,
        title: str,
        filter_name: str,
        extensions: Sequence[str],
        initial_dir: str | None = None,
    ) -> str | None:
        """Show the dialog and return the chosen path, or None if dismissed.

        *extensions* is the default filter; an "All Files" option must stay
        available. Raise if the dialog cannot be presented.
        """


class UiShell(Protocol):
    """Platform UI surface (menu bar/tray, notifications, state indicators)."""

    def set_state(self, state: ImportState, message: str | None = None) -> None:
        """Render a new import state and optional status message."""

    def show_notification(self, title: str, message: str) -> None:
        """Display a user notification."""


class ClipboardOutput(Protocol):
    """Text output to the system clipboard."""

    def copy_text(self, text: str) -> bool:
        """Copy text to clipboard; return False if the clipboard is unavailable."""
