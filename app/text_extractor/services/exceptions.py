"""
Shared exceptions for the extraction services.
"""


class ExtractionError(Exception):
    """Raised when text extraction from a document fails."""

    pass


class PDFExtractionError(ExtractionError):
    """Raised when a PDF cannot be parsed."""

    pass


class DocxExtractionError(ExtractionError):
    """Raised when a DOCX document cannot be parsed."""

    pass


class UnsupportedFileTypeError(Exception):
    """Raised when an upload is neither a PDF nor a DOCX document."""

    def __init__(self, content_type: str | None, filename: str | None):
        self.content_type = content_type
        self.filename = filename
        super().__init__(
            f"Unsupported file type: {filename!r} ({content_type or 'no content type'})"
        )
