from pathlib import Path

from docintake.processor.exceptions import FileReadError


class FileLoader:
    """Reads an upload's bytes from the local filesystem."""

    def load(self, path: Path) -> bytes:
        """Read the whole file into memory.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the path exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
