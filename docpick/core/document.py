"""Picked document values and pick outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

SUPPORTED_EXTENSIONS = ("txt", "md", "csv", "json")
FILTER_NAME = "Text Files (*.txt, *.md, *.csv, *.json)"
DEFAULT_TITLE = "Select Q&A Document"

# Checked in order, first suffix match wins. Matching is case-sensitive.
MIME_TYPES = (
    (".txt", "text/plain"),
    (".md", "text/markdown"),
    (".csv", "text/csv"),
    (".json", "application/json"),
)

EMPTY_FILE_MESSAGE = "File is empty"
READ_ERROR_PREFIX = "Error reading file: "
DIALOG_ERROR_PREFIX = "Failed to open file picker: "


class FailureKind(str, Enum):
    """Why a pick produced no document."""

    EMPTY_CONTENT = "empty_content"
    READ_FAILURE = "read_failure"
    DIALOG_FAILURE = "dialog_failure"


@dataclass(frozen=True)
class PickedDocument:
    """A successfully read, non-blank text document."""

    file_name: str
    content: str
    mime_type: str | None = None
    path: str | None = None


@dataclass(frozen=True)
class Picked:
    document: PickedDocument


@dataclass(frozen=True)
class Cancelled:
    """The dialog was dismissed without choosing a file."""


@dataclass(frozen=True)
class Failed:
    kind: FailureKind
    message: str


Outcome = Union[Picked, Cancelled, Failed]

CANCELLED = Cancelled()


def classify_mime_type(file_name: str) -> str | None:
    """Return the media type for *file_name*, or None for unknown extensions."""
    for suffix, mime_type in MIME_TYPES:
        if file_name.endswith(suffix):
            return mime_type
    return None


def suggested_title(file_name: str) -> str:
    """Turn a file name like ``world_history-quiz.md`` into ``world history quiz``."""
    stem = file_name.rsplit(".", 1)[0] if "." in file_name else file_name
    return stem.replace("_", " ").replace("-", " ")
