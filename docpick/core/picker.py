"""Document picker: one file-selection-and-read cycle per launch."""

from __future__ import annotations

import logging
from typing import Callable

from docpick.core.document import (
    CANCELLED,
    DEFAULT_TITLE,
    DIALOG_ERROR_PREFIX,
    FILTER_NAME,
    SUPPORTED_EXTENSIONS,
    Failed,
    FailureKind,
    Outcome,
    Picked,
    PickedDocument,
)
from docpick.core.reader import read_document
from docpick.platform.base import FileChooser

LOG = logging.getLogger("docpick")


class DocumentPicker:
    """Presents a file chooser, reads the chosen file and reports the outcome.

    Every ``launch()`` ends in exactly one callback: ``on_result`` with a
    :class:`PickedDocument` (or ``None`` when the user cancelled), or
    ``on_error`` with a description of what went wrong. Nothing raised by the
    chooser or the read escapes to the caller.
    """

    def __init__(
        self,
        on_result: Callable[[PickedDocument | None], None],
        on_error: Callable[[str], None],
        chooser: FileChooser | None = None,
        title: str = DEFAULT_TITLE,
        encoding: str = "utf-8",
    ):
        if chooser is None:
            from docpick.platform import default_file_chooser

            chooser = default_file_chooser()
        self.on_result = on_result
        self.on_error = on_error
        self.chooser: FileChooser = chooser
        self.title = title
        self.encoding = encoding

    def pick(self, initial_dir: str | None = None) -> Outcome:
        """Run one pick cycle and return its outcome without dispatching it."""
        try:
            path = self.chooser.choose_file(
                title=self.title,
                filter_name=FILTER_NAME,
                extensions=SUPPORTED_EXTENSIONS,
                initial_dir=initial_dir,
            )
        except Exception as exc:
            LOG.error(f"File chooser failed: {exc}", exc_info=True)
            return Failed(FailureKind.DIALOG_FAILURE, f"{DIALOG_ERROR_PREFIX}{exc}")

        if not path:
            LOG.info("File selection cancelled")
            return CANCELLED

        return read_document(path, encoding=self.encoding)

    def launch(self, initial_dir: str | None = None) -> None:
        """Run one pick cycle and deliver the outcome to the callbacks."""
        outcome = self.pick(initial_dir=initial_dir)
        if isinstance(outcome, Failed):
            self.on_error(outcome.message)
        elif isinstance(outcome, Picked):
            self.on_result(outcome.document)
        else:
            self.on_result(None)
