"""
Tests for in-place repair of documents on disk.
"""

import os
import stat

import pytest

from jsonmender import DocumentDecodeError, DocumentNotFoundError, repair_file
from jsonmender.utils.files import atomic_write, backup_path_for, read_document

BROKEN = '[\n  {"ID": 1}\n  {"ID": 2}\n]\n'
REPAIRED = '[\n  {"ID": 1},\n  {"ID": 2}\n]\n'


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "content.json"
    path.write_text(BROKEN, encoding="utf-8")
    return path


class TestRepairFile:
    """Backup and overwrite behaviour of repair_file()."""

    def test_repair_writes_backup_and_document(self, document) -> None:
        """Test that the original is kept and the repair written."""
        outcome = repair_file(document)

        assert outcome.written
        assert outcome.backup_path == str(document) + ".backup"
        assert document.read_text(encoding="utf-8") == REPAIRED
        with open(outcome.backup_path, encoding="utf-8") as handle:
            assert handle.read() == BROKEN

    def test_valid_document_left_alone(self, tmp_path) -> None:
        """Test that no backup is created when nothing changes."""
        path = tmp_path / "ok.json"
        path.write_text(REPAIRED, encoding="utf-8")

        outcome = repair_file(path)

        assert not outcome.written
        assert outcome.backup_path is None
        assert not os.path.exists(backup_path_for(path))
        assert outcome.report().hints() == ["The JSON document is already well-formed"]

    def test_dry_run_writes_nothing(self, document) -> None:
        outcome = repair_file(document, dry_run=True)

        assert outcome.result.changed
        assert not outcome.written
        assert document.read_text(encoding="utf-8") == BROKEN
        assert not os.path.exists(backup_path_for(document))

    def test_written_even_with_remaining_errors(self, tmp_path) -> None:
        """Test that partial repairs are still saved."""
        path = tmp_path / "partial.json"
        path.write_text('```json\n{"Title": "a "b"}\n```', encoding="utf-8")

        outcome = repair_file(path)

        assert outcome.written
        assert outcome.result.errors
        assert outcome.result.valid is False
        assert path.read_text(encoding="utf-8") == '{"Title": "a "b"}'

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(DocumentNotFoundError) as exc_info:
            repair_file(tmp_path / "absent.json")
        assert "absent.json" in str(exc_info.value)

    def test_crlf_preserved_in_backup(self, tmp_path) -> None:
        """Test that the backup is byte-identical to the original."""
        path = tmp_path / "windows.json"
        original = b'```json\r\n[\r\n  {"ID": 1}\r\n]\r\n```\r\n'
        path.write_bytes(original)

        outcome = repair_file(path)

        assert outcome.written
        with open(outcome.backup_path, "rb") as handle:
            assert handle.read() == original
        assert path.read_bytes() == b'[\r\n  {"ID": 1}\r\n]\r\n'

    def test_existing_backup_overwritten(self, document) -> None:
        backup = backup_path_for(document)
        with open(backup, "w", encoding="utf-8") as handle:
            handle.write("stale")

        repair_file(document)

        with open(backup, encoding="utf-8") as handle:
            assert handle.read() == BROKEN


class TestFileHelpers:
    """Low-level read and write helpers."""

    def test_read_document_missing(self, tmp_path) -> None:
        with pytest.raises(DocumentNotFoundError):
            read_document(tmp_path / "nope.json")

    def test_read_document_wrong_encoding(self, tmp_path) -> None:
        """Test that undecodable bytes raise a package error."""
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff"}')

        with pytest.raises(DocumentDecodeError) as exc_info:
            read_document(path)
        assert exc_info.value.encoding == "utf-8"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_read_document_directory(self, tmp_path) -> None:
        """Test that a directory is not treated as a document."""
        with pytest.raises(DocumentNotFoundError):
            read_document(tmp_path)

    def test_atomic_write_leaves_no_temporary_files(self, tmp_path) -> None:
        path = tmp_path / "out.json"
        atomic_write(path, "[]")

        assert path.read_text(encoding="utf-8") == "[]"
        assert sorted(os.listdir(tmp_path)) == ["out.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_backup_keeps_file_mode(self, document) -> None:
        """Test that the backup and the repaired file keep the original mode."""
        os.chmod(document, 0o640)

        outcome = repair_file(document)

        assert stat.S_IMODE(os.stat(outcome.backup_path).st_mode) == 0o640
        assert stat.S_IMODE(os.stat(document).st_mode) == 0o640
