"""Import session: drives the picker on behalf of the host UI."""

from __future__ import annotations

import logging
import os

from docpick.core.config import normalize_config, save_config
from docpick.core.document import PickedDocument, suggested_title
from docpick.core.picker import DocumentPicker
from docpick.core.state import STATE_DESCRIPTIONS, FilePickerState, ImportState
from docpick.platform.base import ClipboardOutput, FileChooser, UiShell

LOG = logging.getLogger("docpick")


class ImportSession:
    """Owns the picker state shown by the host and reacts to pick outcomes."""

    def __init__(
        self,
        chooser: FileChooser | None = None,
        ui: UiShell | None = None,
        clipboard: ClipboardOutput | None = None,
        config=None,
        save=save_config,
    ):
        self.chooser = chooser
        self.ui = ui
        self.clipboard = clipboard
        self.config = normalize_config(config)
        self._save = save
        self.state = FilePickerState()

    def import_document(self) -> FilePickerState:
        """Open the chooser once and return the resulting picker state.

        A cancel or a failure keeps the previously imported document.
        """
        self.state = FilePickerState(
            is_picker_open=True,
            result=self.state.result,
            suggested_name=self.state.suggested_name,
        )
        self._set_ui(ImportState.PICKING)

        picker = DocumentPicker(
            on_result=self._on_result,
            on_error=self._on_error,
            chooser=self.chooser,
            title=self.config["dialog_title"],
            encoding=self.config["encoding"],
        )
        initial_dir = self.config["last_directory"] if self.config["remember_last_directory"] else None
        picker.launch(initial_dir=initial_dir)
        return self.state

    def copy_last(self) -> bool:
        """Copy the most recently imported document to the clipboard."""
        document = self.state.result
        if document is None or self.clipboard is None:
            return False
        return self.clipboard.copy_text(document.content)

    def update_config(self, **changes) -> None:
        """Apply setting changes and persist them."""
        self.config = normalize_config({**self.config, **changes})
        self._save(self.config)

    def _on_result(self, document: PickedDocument | None) -> None:
        if document is None:
            self.state = FilePickerState(result=self.state.result, suggested_name=self.state.suggested_name)
            self._set_ui(ImportState.CANCELLED)
            return

        self.state = FilePickerState(result=document, suggested_name=suggested_title(document.file_name))
        LOG.info(f"Imported {document.file_name} as {self.state.suggested_name!r}")

        if self.config["copy_to_clipboard"] and self.clipboard is not None:
            if not self.clipboard.copy_text(document.content):
                LOG.warning(f"Could not copy {document.file_name} to clipboard")

        changes = {"total_imports": self.config["total_imports"] + 1}
        if self.config["remember_last_directory"] and document.path:
            changes["last_directory"] = os.path.dirname(document.path)
        self.update_config(**changes)

        self._set_ui(ImportState.IMPORTED, document.file_name)
        self._notify("Document imported", f"{document.file_name} ({len(document.content)} characters)")

    def _on_error(self, message: str) -> None:
        LOG.warning(f"Import failed: {message}")
        self.state = FilePickerState(
            result=self.state.result,
            error=message,
            suggested_name=self.state.suggested_name,
        )
        self._set_ui(ImportState.ERROR, message)
        self._notify(STATE_DESCRIPTIONS[ImportState.ERROR], message)

    def _set_ui(self, state: ImportState, message: str | None = None) -> None:
        if self.ui is not None:
            self.ui.set_state(state, message)

    def _notify(self, title: str, message: str) -> None:
        if self.ui is not None and self.config["show_notifications"]:
            self.ui.show_notification(title, message)
