"""Shared import state values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from docpick.core.document import PickedDocument


class ImportState(str, Enum):
    """High-level user-visible import states."""

    READY = "ready"
    PICKING = "picking"
    IMPORTED = "imported"
    CANCELLED = "cancelled"
    ERROR = "error"


STATE_ICONS = {
    ImportState.READY: "📄",
    ImportState.PICKING: "📂",
    ImportState.IMPORTED: "✅",
    ImportState.CANCELLED: "📄",
    ImportState.ERROR: "❌",
}

STATE_DESCRIPTIONS = {
    ImportState.READY: "Ready - choose a document to import",
    ImportState.PICKING: "Waiting for file selection...",
    ImportState.IMPORTED: "Document imported",
    ImportState.CANCELLED: "Import cancelled",
    ImportState.ERROR: "Import failed",
}


@dataclass(frozen=True)
class FilePickerState:
    """Snapshot of the picker as seen by the host UI."""

    is_picker_open: bool = False
    result: PickedDocument | None = None
    error: str | None = None
    suggested_name: str | None = None
