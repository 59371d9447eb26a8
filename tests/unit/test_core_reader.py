import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from docpick.core import reader
from docpick.core.document import FailureKind, Failed, Picked, PickedDocument


class CoreReaderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, text):
        path = self.dir / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_markdown_file_is_picked_with_type(self):
        path = self._write("notes.md", "# Title\nbody")

        outcome = reader.read_document(path)

        self.assertEqual(
            outcome,
            Picked(PickedDocument(
                file_name="notes.md",
                content="# Title\nbody",
                mime_type="text/markdown",
                path=str(path),
            )),
        )

    def test_unknown_extension_is_picked_without_type(self):
        path = self._write("archive.zip", "hello")

        outcome = reader.read_document(path)

        self.assertIsInstance(outcome, Picked)
        self.assertEqual(outcome.document.file_name, "archive.zip")
        self.assertEqual(outcome.document.content, "hello")
        self.assertIsNone(outcome.document.mime_type)

    def test_whitespace_only_file_is_empty(self):
        path = self._write("data.csv", "   \n  ")

        outcome = reader.read_document(path)

        self.assertEqual(outcome, Failed(FailureKind.EMPTY_CONTENT, "File is empty"))

    def test_zero_byte_file_is_empty(self):
        path = self._write("blank.json", "")

        outcome = reader.read_document(path)

        self.assertEqual(outcome.kind, FailureKind.EMPTY_CONTENT)

    def test_content_is_returned_verbatim(self):
        path = self.dir / "crlf.txt"
        path.write_bytes(b"Q: one?\r\nA: two\r\n")

        outcome = reader.read_document(path)

        self.assertEqual(outcome.document.content, "Q: one?\r\nA: two\r\n")

    def test_missing_file_is_a_read_failure(self):
        outcome = reader.read_document(self.dir / "gone.txt")

        self.assertEqual(outcome.kind, FailureKind.READ_FAILURE)
        self.assertTrue(outcome.message.startswith("Error reading file: "))

    def test_permission_denied_is_a_read_failure(self):
        path = self._write("locked.txt", "secret")

        with patch.object(reader, "open", side_effect=PermissionError("Permission denied"), create=True):
            with self.assertLogs("docpick", level="WARNING"):
                outcome = reader.read_document(path)

        self.assertEqual(outcome, Failed(FailureKind.READ_FAILURE, "Error reading file: Permission denied"))

    def test_undecodable_bytes_are_a_read_failure(self):
        path = self.dir / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfd not utf-8")

        outcome = reader.read_document(path)

        self.assertEqual(outcome.kind, FailureKind.READ_FAILURE)
        self.assertIn("Error reading file: ", outcome.message)
        self.assertIn("codec", outcome.message)

    def test_configured_encoding_is_used(self):
        path = self.dir / "latin.txt"
        path.write_bytes("café".encode("latin-1"))

        outcome = reader.read_document(path, encoding="latin-1")

        self.assertEqual(outcome.document.content, "café")


if __name__ == "__main__":
    unittest.main()
