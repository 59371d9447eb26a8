"""Core platform-agnostic document import logic."""

from docpick.core.config import (
    CONFIG_DIR,
    CONFIG_FILE,
    DEFAULT_CONFIG,
    load_config,
    normalize_config,
    save_config,
)
from docpick.core.document import (
    CANCELLED,
    SUPPORTED_EXTENSIONS,
    Cancelled,
    Failed,
    FailureKind,
    Outcome,
    Picked,
    PickedDocument,
    classify_mime_type,
    suggested_title,
)
from docpick.core.picker import DocumentPicker
from docpick.core.reader import read_document
from docpick.core.session import ImportSession
from docpick.core.state import STATE_DESCRIPTIONS, STATE_ICONS, FilePickerState, ImportState

__all__ = [
    "DocumentPicker",
    "ImportSession",
    "PickedDocument",
    "Picked",
    "Cancelled",
    "Failed",
    "FailureKind",
    "Outcome",
    "CANCELLED",
    "SUPPORTED_EXTENSIONS",
    "classify_mime_type",
    "suggested_title",
    "read_document",
    "ImportState",
    "FilePickerState",
    "STATE_ICONS",
    "STATE_DESCRIPTIONS",
    "CONFIG_DIR",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "load_config",
    "normalize_config",
    "save_config",
]
