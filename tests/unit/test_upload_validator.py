import pytest

from docintake.extraction.models import DOCX, PDF, TXT, UNKNOWN
from docintake.processor.exceptions import (
    DisallowedExtensionError,
    FileTooLargeError,
    MissingFileError,
    UnsupportedFileTypeError,
    UploadRejectedError,
)
from docintake.processor.upload_validator import UploadValidator

MB = 1024 * 1024


def _validator(max_upload_bytes: int = 50 * MB) -> UploadValidator:
    return UploadValidator(
        max_upload_bytes=max_upload_bytes,
        allowed_extensions=[".pdf", ".docx", ".txt"],
    )


class TestUploadValidator:
    def test_accepts_pdf(self) -> None:
        classification = _validator().validate(b"%PDF-1.7 body", "scope.pdf")

        assert classification.is_valid
        assert classification.file_type == PDF

    def test_accepts_uppercase_extension(self) -> None:
        assert _validator().validate(b"PK\x03\x04", "PLAN.DOCX").file_type == DOCX

    def test_accepts_utf8_text(self) -> None:
        assert _validator().validate("회의록".encode(), "minutes.txt").file_type == TXT

    @pytest.mark.parametrize(("buffer", "file_name"), [(b"", "a.pdf"), (b"%PDF", "")])
    def test_missing_upload(self, buffer: bytes, file_name: str) -> None:
        with pytest.raises(MissingFileError):
            _validator().validate(buffer, file_name)

    def test_size_limit(self) -> None:
        buffer = b"%PDF" + b"0" * (2 * MB)

        with pytest.raises(FileTooLargeError, match="2MB"):
            _validator(max_upload_bytes=2 * MB).validate(buffer, "big.pdf")

    def test_size_limit_is_inclusive(self) -> None:
        buffer = b"%PDF" + b"0" * (MB - 4)

        assert _validator(max_upload_bytes=MB).validate(buffer, "edge.pdf").file_type == PDF

    def test_disallowed_extension(self) -> None:
        with pytest.raises(DisallowedExtensionError, match=r"\.exe"):
            _validator().validate(b"MZ\x90\x00", "setup.exe")

    def test_missing_extension(self) -> None:
        with pytest.raises(DisallowedExtensionError, match="README"):
            _validator().validate(b"text", "README")

    def test_content_must_match_a_supported_type(self) -> None:
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            _validator().validate(b"not really a pdf", "fake.pdf")

        assert exc_info.value.detected_type == UNKNOWN

    def test_invalid_utf8_text_is_rejected(self) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            _validator().validate(b"\xff\xfe\x00", "notes.txt")

    def test_rejections_share_a_base_class(self) -> None:
        with pytest.raises(UploadRejectedError):
            _validator().validate(b"", "")
