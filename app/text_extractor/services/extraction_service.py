"""
Extraction dispatcher.

Routes an upload to the PDF or DOCX extractor based on its declared
MIME type and filename, then normalizes the resulting text.
"""

import asyncio
import logging

from ..models import DOCX_MIME_TYPE, PDF_MIME_TYPE, DocumentType
from .docx_service import DocxService, get_docx_service
from .exceptions import UnsupportedFileTypeError
from .normalization import normalize_text
from .pdf_service import PDFService, get_pdf_service

logger = logging.getLogger(__name__)


def detect_document_type(
    content_type: str | None, filename: str | None
) -> DocumentType | None:
    """
    Determine the document type from client-declared metadata.

    Only the declared MIME type and the filename extension are inspected;
    the file content is never sniffed. DOCX takes precedence over PDF.

    Args:
        content_type: MIME type declared for the upload.
        filename: Original filename of the upload.

    Returns:
        The detected DocumentType, or None if neither format matches.
    """
    name = (filename or "").lower()

    if content_type == DOCX_MIME_TYPE or name.endswith(".docx"):
        return DocumentType.DOCX
    if content_type == PDF_MIME_TYPE or name.endswith(".pdf"):
        return DocumentType.PDF
    return None


class ExtractionService:
    """
    Service that turns an uploaded document into normalized plain text.

    Delegates parsing to PDFService and DocxService.
    """

    def __init__(
        self,
        pdf_service: PDFService | None = None,
        docx_service: DocxService | None = None,
    ):
        """
        Initialize the extraction service.

        Args:
            pdf_service: PDF extractor. Defaults to the shared PDFService.
            docx_service: DOCX extractor. Defaults to the shared DocxService.
        """
        self.pdf_service = pdf_service or get_pdf_service()
        self.docx_service = docx_service or get_docx_service()

    def extract_raw(
        self, file_bytes: bytes, content_type: str | None, filename: str | None
    ) -> str:
        """
        Extract text without normalization.

        Raises:
            UnsupportedFileTypeError: If the upload is neither PDF nor DOCX.
            ExtractionError: If the underlying library fails.
        """
        document_type = detect_document_type(content_type, filename)
        if document_type is None:
            raise UnsupportedFileTypeError(content_type, filename)
        return self._extract_as(document_type, file_bytes, filename)

    def _extract_as(
        self, document_type: DocumentType, file_bytes: bytes, filename: str | None
    ) -> str:
        """Run the extractor for an already detected document type."""
        if document_type is DocumentType.DOCX:
            logger.info("Extracting DOCX text: %s (%d bytes)", filename, len(file_bytes))
            return self.docx_service.extract_text(file_bytes)

        logger.info("Extracting PDF text: %s (%d bytes)", filename, len(file_bytes))
        return self.pdf_service.extract_text(file_bytes)

    async def extract(
        self, file_bytes: bytes, content_type: str | None, filename: str | None
    ) -> str:
        """
        Extract and normalize the text of an uploaded document.

        The type is detected once, before any work is handed to a thread;
        the blocking parser then runs in a worker thread.

        Args:
            file_bytes: Raw upload content.
            content_type: MIME type declared for the upload.
            filename: Original filename of the upload.

        Returns:
            Normalized document text.

        Raises:
            UnsupportedFileTypeError: If the upload is neither PDF nor DOCX.
            ExtractionError: If the underlying library fails.
        """
        document_type = detect_document_type(content_type, filename)
        if document_type is None:
            raise UnsupportedFileTypeError(content_type, filename)

        raw_text = await asyncio.to_thread(
            self._extract_as, document_type, file_bytes, filename
        )
        return normalize_text(raw_text)


_extraction_service: ExtractionService | None = None


def get_extraction_service() -> ExtractionService:
    """Get or create the extraction service singleton."""
    global _extraction_service
    if _extraction_service is None:
        _extraction_service = ExtractionService()
    return _extraction_service
