"""
Services package for the text extraction application.

Contains:
- pdf_service: PDF text extraction via pdfplumber
- docx_service: DOCX text extraction via mammoth
- extraction_service: File-type dispatch and normalization
- normalization: Whitespace cleanup of extracted text
"""

from .docx_service import DocxService
from .exceptions import (
    DocxExtractionError,
    ExtractionError,
    PDFExtractionError,
    UnsupportedFileTypeError,
)
from .extraction_service import ExtractionService, detect_document_type
from .normalization import normalize_text
from .pdf_service import PDFService

__all__ = [
    "DocxService",
    "ExtractionService",
    "PDFService",
    "ExtractionError",
    "PDFExtractionError",
    "DocxExtractionError",
    "UnsupportedFileTypeError",
    "detect_document_type",
    "normalize_text",
]
