"""Read, validate and classify a chosen file."""

from __future__ import annotations

import logging
import os

from docpick.core.document import (
    EMPTY_FILE_MESSAGE,
    READ_ERROR_PREFIX,
    Failed,
    FailureKind,
    Picked,
    PickedDocument,
    classify_mime_type,
)

LOG = logging.getLogger("docpick")


def read_document(path, encoding="utf-8") -> Picked | Failed:
    """Read *path* as text and turn it into a pick outcome.

    Never raises for I/O or decoding problems; those come back as
    ``Failed(READ_FAILURE)``. Blank content is ``Failed(EMPTY_CONTENT)``.
    """
    path = os.fspath(path)
    file_name = os.path.basename(path)
    try:
        with open(path, encoding=encoding, newline="") as f:
            content = f.read()
    except Exception as exc:
        LOG.warning(f"Failed to read {path}: {exc}")
        return Failed(FailureKind.READ_FAILURE, f"{READ_ERROR_PREFIX}{exc}")

    if not content.strip():
        LOG.info(f"Discarding blank file: {path}")
        return Failed(FailureKind.EMPTY_CONTENT, EMPTY_FILE_MESSAGE)

    document = PickedDocument(
        file_name=file_name,
        content=content,
        mime_type=classify_mime_type(file_name),
        path=os.path.abspath(path),
    )
    LOG.info(f"Read {file_name} ({len(content)} chars, {document.mime_type or 'unknown type'})")
    return Picked(document)
