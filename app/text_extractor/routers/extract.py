"""
Router for the text extraction endpoint.

Handles:
- Authenticated upload of a single PDF or DOCX document
- Returning its normalized plain text

The multipart body is only read after the API key has been checked,
so unauthenticated uploads are never parsed or spooled.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.datastructures import UploadFile

from ..config import Settings, get_settings
from ..models import ErrorResponse, ExtractionResponse
from ..security import require_api_key
from ..services.exceptions import ExtractionError, UnsupportedFileTypeError
from ..services.extraction_service import ExtractionService, get_extraction_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["extract"])

UPLOAD_FIELD = "file"

# Allowance for multipart boundaries and part headers on top of the file itself
MULTIPART_OVERHEAD_BYTES = 64 * 1024


def _check_declared_length(request: Request, settings: Settings) -> None:
    """
    Reject a request whose Content-Length cannot fit under the upload limit.

    Raises:
        HTTPException: 413 if the declared body is too large.
    """
    declared = request.headers.get("content-length", "")
    if not declared.isdigit():
        # Chunked or missing; the per-file read limit still applies
        return

    if int(declared) > settings.max_upload_bytes + MULTIPART_OVERHEAD_BYTES:
        logger.warning(
            "Rejected request body of %s bytes: exceeds %d byte upload limit",
            declared,
            settings.max_upload_bytes,
        )
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="File too large",
        )


@router.post(
    "/extract",
    response_model=ExtractionResponse,
    dependencies=[Depends(require_api_key)],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unsupported file"},
        401: {"model": ErrorResponse, "description": "Missing or invalid API key"},
        413: {"model": ErrorResponse, "description": "File exceeds upload limit"},
        500: {"model": ErrorResponse, "description": "Extraction failed"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "multipart/form-data": {
                    "schema": {
                        "type": "object",
                        "properties": {
                            UPLOAD_FIELD: {
                                "type": "string",
                                "format": "binary",
                                "description": "PDF or DOCX document to extract",
                            }
                        },
                    }
                }
            },
        }
    },
)
async def extract_text(
    request: Request,
    settings: Settings = Depends(get_settings),
    extraction_service: ExtractionService = Depends(get_extraction_service),
) -> ExtractionResponse:
    """
    Extract plain text from an uploaded document.

    Expects a multipart body with a single "file" part. The document type is
    taken from the declared MIME type or the filename extension. Requires the
    x-api-key header.
    """
    _check_declared_length(request, settings)

    form = await request.form(max_files=1)
    try:
        file = form.get(UPLOAD_FIELD)

        # A plain text field named "file" is not an upload
        if not isinstance(file, UploadFile):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No file uploaded",
            )

        return await _extract_upload(file, settings, extraction_service)
    finally:
        await form.close()


async def _extract_upload(
    file: UploadFile, settings: Settings, extraction_service: ExtractionService
) -> ExtractionResponse:
    """Size-check, extract and normalize one uploaded file."""
    filename = file.filename or ""

    try:
        # Read one byte past the limit so oversized uploads are detectable
        file_bytes = await file.read(settings.max_upload_bytes + 1)

        if len(file_bytes) > settings.max_upload_bytes:
            logger.warning(
                "Rejected upload %s: exceeds %d bytes", filename, settings.max_upload_bytes
            )
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail="File too large",
            )

        logger.info(
            "Processing upload: %s (%s, %d bytes)",
            filename,
            file.content_type,
            len(file_bytes),
        )

        text = await extraction_service.extract(
            file_bytes, file.content_type, filename
        )

        return ExtractionResponse(filename=filename, text=text)

    except HTTPException:
        raise
    except UnsupportedFileTypeError as e:
        logger.info("%s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unsupported file type",
        )
    except ExtractionError:
        logger.exception("Extraction failed for %s", filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Extraction failed",
        )
    except Exception:
        logger.exception("Unexpected error extracting %s", filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Extraction failed",
        )
