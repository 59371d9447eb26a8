#!/usr/bin/env python3
"""
Document Importer - macOS Menu Bar App

Pick a text document (.txt, .md, .csv, .json) from the menu bar, read it,
and hand its content to whatever needs it: the clipboard, a flashcard deck,
a chat prompt.

Usage:
    python3 document_importer.py [--debug]

Requirements:
    - macOS (uses rumps for the menu bar, AppKit for the open panel)
    - Python 3.9+
"""

import os
import sys
import logging
from pathlib import Path

from docpick.core.config import load_config, save_config
from docpick.core.session import ImportSession
from docpick.core.state import ImportState, STATE_DESCRIPTIONS, STATE_ICONS
from docpick.platform import default_file_chooser
from docpick.platform.clipboard import PyperclipClipboard
from docpick.platform.macos.output import show_notification

# Debug logging - opt-in via --debug flag or DOCPICK_DEBUG=1 env var
_DEBUG = ("--debug" in sys.argv) or (os.environ.get("DOCPICK_DEBUG") == "1")
if "--debug" in sys.argv:
    sys.argv.remove("--debug")
_LOG_PATH = Path.home() / ".config" / "docpick" / "debug.log"
_LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    filename=str(_LOG_PATH) if _DEBUG else os.devnull,
    level=logging.DEBUG if _DEBUG else logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("docpick")

import rumps

__version__ = "1.0.0"


class MenuBarShell:
    """UiShell backed by the rumps status item."""

    def __init__(self, app):
        self.app = app

    def set_state(self, state, message=None):
        self.app.title = STATE_ICONS[state]
        status = STATE_DESCRIPTIONS[state]
        if message:
            status = f"{status}: {message}"
        self.app.status_item.title = f"Status: {status}"

    def show_notification(self, title, message):
        show_notification(title, message)


class DocumentImporterApp(rumps.App):
    """Menu bar host for the document picker."""

    def __init__(self):
        super().__init__("Document Importer", title=STATE_ICONS[ImportState.READY], quit_button=None)
        self._build_menu()
        self.shell = MenuBarShell(self)
        self.session = ImportSession(
            chooser=default_file_chooser(),
            ui=self.shell,
            clipboard=PyperclipClipboard(),
            config=load_config(),
            save=save_config,
        )
        self._sync_toggles()
        self.shell.set_state(ImportState.READY)

    def _build_menu(self):
        self.status_item = rumps.MenuItem("Status: Ready")
        self.import_item = rumps.MenuItem("Import Document…", callback=self.import_document, key="o")
        self.last_item = rumps.MenuItem("Last Import: none")
        self.copy_last_item = rumps.MenuItem("Copy Last Import", callback=self.copy_last)

        self.copy_item = rumps.MenuItem("Copy on Import", callback=self.toggle_copy)
        self.notif_item = rumps.MenuItem("Notifications", callback=self.toggle_notifications)
        self.remember_item = rumps.MenuItem("Remember Last Folder", callback=self.toggle_remember)

        self.menu = [
            self.status_item,
            None,
            self.import_item,
            self.last_item,
            self.copy_last_item,
            None,
            self.copy_item,
            self.notif_item,
            self.remember_item,
            None,
            rumps.MenuItem(f"About (v{__version__})", callback=self.show_about),
            rumps.MenuItem("Quit", callback=rumps.quit_application),
        ]

    def _sync_toggles(self):
        config = self.session.config
        self.copy_item.state = config["copy_to_clipboard"]
        self.notif_item.state = config["show_notifications"]
        self.remember_item.state = config["remember_last_directory"]

    def import_document(self, sender):
        """Run one pick cycle from the menu."""
        state = self.session.import_document()
        if state.error:
            rumps.alert(title="Import Failed", message=state.error, ok="OK")
        elif state.result is not None:
            self.last_item.title = f"Last Import: {state.suggested_name} ({state.result.file_name})"

    def copy_last(self, sender):
        if not self.session.copy_last():
            rumps.alert(title="Copy Last Import", message="Nothing to copy yet.", ok="OK")

    def toggle_copy(self, sender):
        sender.state = not sender.state
        self.session.update_config(copy_to_clipboard=bool(sender.state))

    def toggle_notifications(self, sender):
        sender.state = not sender.state
        self.session.update_config(show_notifications=bool(sender.state))

    def toggle_remember(self, sender):
        sender.state = not sender.state
        changes = {"remember_last_directory": bool(sender.state)}
        if not sender.state:
            changes["last_directory"] = None
        self.session.update_config(**changes)

    def show_about(self, sender):
        """Show about dialog."""
        rumps.alert(
            title="Document Importer",
            message=f"Version {__version__}\n\n"
                    f"Import .txt, .md, .csv and .json documents\n"
                    f"from the macOS menu bar.\n\n"
                    f"Lifetime imports: {self.session.config['total_imports']}",
        )


def main():
    log.info("Starting Document Importer v%s", __version__)
    DocumentImporterApp().run()


if __name__ == "__main__":
    main()
