"""
Pydantic models for the text extraction API.

Defines the supported document types and the JSON bodies returned
by the HTTP endpoints.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from . import __version__


class DocumentType(str, Enum):
    """Document formats the service can extract text from."""

    PDF = "pdf"
    DOCX = "docx"


# MIME types declared by clients for each supported format
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
PDF_MIME_TYPE = "application/pdf"


class ExtractionResponse(BaseModel):
    """
    Successful extraction result.

    Attributes:
        success: Always True for a successful extraction.
        filename: Original name of the uploaded file.
        characters: Length of the normalized text, derived from text.
        text: Normalized plain text of the document.
    """

    success: bool = Field(default=True)
    filename: str = Field(
        ...,
        description="Original filename of the upload",
        examples=["report.pdf"],
    )
    characters: int = Field(
        default=0,
        ge=0,
        description="Number of characters in the normalized text",
    )
    text: str = Field(
        ...,
        description="Normalized plain text extracted from the document",
    )

    @model_validator(mode="after")
    def count_characters(self) -> "ExtractionResponse":
        """Keep characters equal to the length of text."""
        self.characters = len(self.text)
        return self


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(..., examples=["Unauthorized"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    version: str = Field(default=__version__)
