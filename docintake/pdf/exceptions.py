class PdfExtractionError(Exception):
    """Raised when a PDF library cannot parse the document."""


class PdfStructureError(PdfExtractionError):
    """Raised when the PDF object model (pages, info dictionary) cannot be read."""
