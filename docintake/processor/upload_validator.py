from pathlib import PurePath

from docintake.extraction.models import FileClassification
from docintake.extraction.sniffer import classify
from docintake.processor.exceptions import (
    DisallowedExtensionError,
    FileTooLargeError,
    MissingFileError,
    UnsupportedFileTypeError,
)

_BYTES_PER_MB = 1024 * 1024


class UploadValidator:
    """Caller-level checks that run before any extraction."""

    def __init__(self, max_upload_bytes: int, allowed_extensions: list[str]) -> None:
        self._max_upload_bytes = max_upload_bytes
        self._allowed_extensions = [ext.lower() for ext in allowed_extensions]

    def validate(self, buffer: bytes, file_name: str) -> FileClassification:
        """Check presence, size, extension and magic bytes of an upload.

        Returns:
            The FileClassification of a valid upload.

        Raises:
            MissingFileError: if the file name or content is empty.
            FileTooLargeError: if the upload exceeds max_upload_bytes.
            DisallowedExtensionError: if the extension is not allowed.
            UnsupportedFileTypeError: if the content is not a supported type.
        """
        if not file_name or not buffer:
            raise MissingFileError("No file was uploaded.")

        if len(buffer) > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes // _BYTES_PER_MB
            raise FileTooLargeError(f"File size exceeds the {limit_mb}MB limit.")

        extension = PurePath(file_name).suffix.lower()
        if extension not in self._allowed_extensions:
            allowed = ", ".join(ext.lstrip(".").upper() for ext in self._allowed_extensions)
            raise DisallowedExtensionError(
                f"Unsupported file extension '{extension or file_name}'. "
                f"Only {allowed} files can be uploaded."
            )

        classification = classify(buffer, file_name)
        if not classification.is_valid:
            raise UnsupportedFileTypeError(
                f"Unsupported file format ({classification.file_type}). "
                "Please upload a PDF, DOCX or TXT file.",
                detected_type=classification.file_type,
            )
        return classification
