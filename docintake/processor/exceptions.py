class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FileReadError(ProcessorError):
    """Raised when an upload cannot be read from disk."""


class UploadRejectedError(ProcessorError):
    """Raised when an upload fails intake validation.

    The message is user-facing.
    """


class MissingFileError(UploadRejectedError):
    """Raised when no file name or no content was uploaded."""


class FileTooLargeError(UploadRejectedError):
    """Raised when the upload exceeds the configured size limit."""


class DisallowedExtensionError(UploadRejectedError):
    """Raised when the file extension is not accepted."""


class UnsupportedFileTypeError(UploadRejectedError):
    """Raised when the content does not sniff as a supported type."""

    def __init__(self, message: str, detected_type: str) -> None:
        super().__init__(message)
        self.detected_type = detected_type
