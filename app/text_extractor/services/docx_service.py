"""
DOCX text extraction service using mammoth.
"""

import io
import logging
from typing import BinaryIO

import mammoth

from .exceptions import DocxExtractionError

logger = logging.getLogger(__name__)


class DocxService:
    """Service for reading the raw text of Word (.docx) documents."""

    def extract_text(self, file_bytes: bytes | BinaryIO) -> str:
        """
        Extract the raw text of a DOCX document.

        The text is returned exactly as mammoth reports it: each paragraph
        followed by a blank line.

        Args:
            file_bytes: DOCX file as bytes or file-like object.

        Returns:
            Raw document text.

        Raises:
            DocxExtractionError: If the document cannot be read.
        """
        if hasattr(file_bytes, "read"):
            docx_bytes = file_bytes.read()
        else:
            docx_bytes = file_bytes

        if not docx_bytes:
            raise DocxExtractionError("Empty DOCX file provided")

        try:
            result = mammoth.extract_raw_text(io.BytesIO(docx_bytes))
        except Exception as e:
            logger.error("DOCX text extraction failed: %s", e)
            raise DocxExtractionError(f"Invalid or corrupted DOCX file: {e}") from e

        for message in result.messages:
            logger.warning("mammoth %s: %s", message.type, message.message)

        return result.value


_docx_service: DocxService | None = None


def get_docx_service() -> DocxService:
    """Get or create the DOCX service singleton."""
    global _docx_service
    if _docx_service is None:
        _docx_service = DocxService()
    return _docx_service
