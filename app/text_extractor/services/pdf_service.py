"""
PDF text extraction service using pdfplumber (pdfminer.six).

Handles reading the text content of PDF documents page by page.
"""

import io
import logging
from typing import BinaryIO

import pdfplumber

from .exceptions import PDFExtractionError

logger = logging.getLogger(__name__)


class PDFService:
    """
    Service for PDF text operations.

    Uses pdfplumber to open the document and collect the words
    (text content items) of every page in reading order.
    """

    def __init__(self, item_separator: str = " ", page_separator: str = "\n"):
        """
        Initialize the PDF service.

        Args:
            item_separator: String placed between text items on a page.
            page_separator: String appended after the text of each page.
        """
        self.item_separator = item_separator
        self.page_separator = page_separator

    def extract_page_texts(self, file_bytes: bytes | BinaryIO) -> list[str]:
        """
        Extract the text of each page of a PDF.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            List of page texts, one per page in page order. Each entry is the
            page's text items joined with the item separator.

        Raises:
            PDFExtractionError: If the document cannot be read for any reason.
        """
        pdf_bytes = _read_bytes(file_bytes)

        if not pdf_bytes:
            raise PDFExtractionError("Empty PDF file provided")

        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                logger.info("Extracting text from PDF (%d page(s))", len(pdf.pages))
                page_texts = []
                for page in pdf.pages:
                    words = page.extract_words()
                    page_texts.append(
                        self.item_separator.join(word["text"] for word in words)
                    )
                    # Release cached layout objects before moving on
                    page.close()
        except Exception as e:
            logger.error("PDF text extraction failed: %s", e)
            raise PDFExtractionError(f"Invalid or corrupted PDF file: {e}") from e

        logger.info("Successfully extracted %d page(s)", len(page_texts))
        return page_texts

    def extract_text(self, file_bytes: bytes | BinaryIO) -> str:
        """
        Extract the full text of a PDF.

        Pages are concatenated in order, each followed by the page separator.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            The concatenated text of the whole document.

        Raises:
            PDFExtractionError: If extraction fails.
        """
        return "".join(
            page_text + self.page_separator
            for page_text in self.extract_page_texts(file_bytes)
        )

    def get_page_count(self, file_bytes: bytes | BinaryIO) -> int:
        """
        Get the total number of pages in a PDF.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            Number of pages in the PDF.

        Raises:
            PDFExtractionError: If page count cannot be determined.
        """
        pdf_bytes = _read_bytes(file_bytes)

        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except Exception as e:
            logger.error("Could not get page count: %s", e)
            raise PDFExtractionError(f"Could not get page count: {e}") from e


def _read_bytes(file_bytes: bytes | BinaryIO) -> bytes:
    """Return raw bytes from bytes or a file-like object."""
    if hasattr(file_bytes, "read"):
        return file_bytes.read()
    return file_bytes


# Singleton instance for convenience
_pdf_service: PDFService | None = None


def get_pdf_service() -> PDFService:
    """Get or create the PDF service singleton."""
    global _pdf_service
    if _pdf_service is None:
        _pdf_service = PDFService()
    return _pdf_service
