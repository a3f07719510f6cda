"""
Tests for the overwrite writer adapter.

This module tests directory handling, overwriting, dry-run mode and
error wrapping.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from testscaffold.adapters.io.writer_overwrite import WriterError, WriterOverwriteAdapter


class TestWriterOverwriteAdapter:
    """Test cases for WriterOverwriteAdapter."""

    def test_write_new_file(self, tmp_path):
        writer = WriterOverwriteAdapter()
        target = tmp_path / "WidgetTests.py"

        result = writer.write_file(target, "import pytest\n")

        assert result["success"] is True
        assert result["file_existed"] is False
        assert result["bytes_written"] == len("import pytest\n")
        assert target.read_text(encoding="utf-8") == "import pytest\n"

    def test_write_replaces_existing_content(self, tmp_path):
        writer = WriterOverwriteAdapter()
        target = tmp_path / "WidgetTests.py"
        target.write_text("old content that is longer\n", encoding="utf-8")

        result = writer.write_file(target, "new\n")

        assert result["file_existed"] is True
        assert target.read_text(encoding="utf-8") == "new\n"

    def test_write_uses_unix_line_endings(self, tmp_path):
        target = tmp_path / "WidgetTests.py"

        WriterOverwriteAdapter().write_file(target, "a\nb\n")

        assert target.read_bytes() == b"a\nb\n"

    def test_dry_run_does_not_write(self, tmp_path):
        writer = WriterOverwriteAdapter(dry_run=True)
        target = tmp_path / "WidgetTests.py"

        result = writer.write_file(target, "import pytest\n")

        assert result["dry_run"] is True
        assert not target.exists()

    def test_write_failure_is_wrapped(self, tmp_path):
        writer = WriterOverwriteAdapter()

        with pytest.raises(WriterError, match="Failed to write file"):
            writer.write_file(tmp_path / "missing" / "WidgetTests.py", "x\n")

    def test_ensure_directory_creates_nested_directories(self, tmp_path):
        writer = WriterOverwriteAdapter()
        target = tmp_path / "a" / "GeneratedTests"

        result = writer.ensure_directory(target)

        assert result == {
            "success": True,
            "directory_path": str(target),
            "created": True,
        }
        assert target.is_dir()

    def test_ensure_directory_is_idempotent(self, tmp_path):
        writer = WriterOverwriteAdapter()

        writer.ensure_directory(tmp_path / "GeneratedTests")
        result = writer.ensure_directory(tmp_path / "GeneratedTests")

        assert result["created"] is False

    def test_ensure_directory_dry_run(self, tmp_path):
        result = WriterOverwriteAdapter(dry_run=True).ensure_directory(tmp_path / "x")

        assert result["dry_run"] is True
        assert result["created"] is True
        assert not (tmp_path / "x").exists()

    def test_ensure_directory_failure_is_wrapped(self, tmp_path):
        writer = WriterOverwriteAdapter()

        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(WriterError, match="denied"):
                writer.ensure_directory(tmp_path / "GeneratedTests")
