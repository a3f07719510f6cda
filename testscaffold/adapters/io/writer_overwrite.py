"""
Writer adapter that replaces test files wholesale.

Generated scaffolds are never merged: each write replaces whatever file of
the same name already exists in the output directory.
"""

import logging
from pathlib import Path
from typing import Any

from ...domain.models import ScaffoldError


class WriterError(ScaffoldError):
    """Exception raised when writer operations fail."""

    pass


class WriterOverwriteAdapter:
    """
    Writer adapter that overwrites test files.

    Content is written verbatim with UTF-8 encoding and ``\\n`` line endings
    so repeated runs produce byte-identical files. Supports dry-run mode.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """
        Initialize the writer adapter.

        Args:
            dry_run: Whether to run in dry-run mode (no actual writing)
        """
        self.dry_run = dry_run
        self.logger = logging.getLogger(__name__)

    def write_file(self, file_path: str | Path, content: str) -> dict[str, Any]:
        """
        Write content to a file, replacing any previous content.

        Args:
            file_path: Path where the file should be written
            content: Content to write to the file

        Returns:
            Dictionary containing write operation results

        Raises:
            WriterError: If file writing fails
        """
        file_path = Path(file_path)
        file_existed = file_path.exists()
        bytes_written = len(content.encode("utf-8"))

        if self.dry_run:
            return {
                "success": True,
                "dry_run": True,
                "file_path": str(file_path),
                "bytes_written": bytes_written,
                "file_existed": file_existed,
            }

        try:
            with open(file_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            self.logger.error(f"File write failed for {file_path}: {e}")
            raise WriterError(f"Failed to write file {file_path}: {e}") from e

        if file_existed:
            self.logger.debug(f"Overwrote existing file {file_path}")

        return {
            "success": True,
            "file_path": str(file_path),
            "bytes_written": bytes_written,
            "file_existed": file_existed,
        }

    def ensure_directory(self, directory_path: str | Path) -> dict[str, Any]:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory_path: Path of the directory to ensure exists

        Returns:
            Dictionary containing directory operation results

        Raises:
            WriterError: If directory creation fails
        """
        directory_path = Path(directory_path)
        existed = directory_path.is_dir()

        if self.dry_run:
            return {
                "success": True,
                "dry_run": True,
                "directory_path": str(directory_path),
                "created": not existed,
            }

        try:
            directory_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriterError(
                f"Failed to ensure directory {directory_path}: {e}"
            ) from e

        return {
            "success": True,
            "directory_path": str(directory_path),
            "created": not existed,
        }
