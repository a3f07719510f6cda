from abc import abstractmethod
from pathlib import Path
from typing import Any, Protocol

"""Port for writing generated test files."""


class WriterPort(Protocol):
    """Port interface for writer operations."""

    @abstractmethod
    def ensure_directory(self, directory: str | Path) -> dict[str, Any]:
        """Create the directory if it does not exist."""
        pass

    @abstractmethod
    def write_file(self, file_path: str | Path, content: str) -> dict[str, Any]:
        """Write content to the file, replacing any previous content."""
        pass
