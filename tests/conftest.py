"""Pytest configuration and fixtures."""

import io
import zipfile
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.text_extractor.config import Settings, get_settings
from app.text_extractor.main import app

TEST_API_KEY = "test-secret-key"


def build_pdf(page_texts: list[str]) -> bytes:
    """
    Build a valid PDF with one page per entry, each showing its text in Helvetica.

    Object offsets in the xref table are computed so strict parsers accept it.
    """
    page_count = len(page_texts)
    font_id = 3
    first_page_id = 4
    page_ids = [first_page_id + 2 * i for i in range(page_count)]

    objects: dict[int, bytes] = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: (
            "<< /Type /Pages /Kids [{}] /Count {} >>".format(
                " ".join(f"{pid} 0 R" for pid in page_ids), page_count
            ).encode()
        ),
        font_id: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for page_id, text in zip(page_ids, page_texts):
        content_id = page_id + 1
        stream = f"BT\n/F1 24 Tf\n72 720 Td\n({text}) Tj\nET".encode()
        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 {font_id} 0 R >> >> "
            f"/Contents {content_id} 0 R >>"
        ).encode()
        objects[content_id] = (
            f"<< /Length {len(stream)} >>\nstream\n".encode()
            + stream
            + b"\nendstream"
        )

    buffer = io.BytesIO()
    buffer.write(b"%PDF-1.4\n")
    offsets = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = buffer.tell()
        buffer.write(f"{obj_id} 0 obj\n".encode())
        buffer.write(objects[obj_id])
        buffer.write(b"\nendobj\n")

    xref_offset = buffer.tell()
    size = max(objects) + 1
    buffer.write(f"xref\n0 {size}\n".encode())
    buffer.write(b"0000000000 65535 f \n")
    for obj_id in range(1, size):
        buffer.write(f"{offsets[obj_id]:010d} 00000 n \n".encode())
    buffer.write(
        f"trailer\n<< /Size {size} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode()
    )
    return buffer.getvalue()


def build_docx(paragraphs: list[str]) -> bytes:
    """Build a minimal Word document containing the given paragraphs."""
    content_types = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
        '<Default Extension="rels" '
        'ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
        '<Default Extension="xml" ContentType="application/xml"/>'
        '<Override PartName="/word/document.xml" '
        'ContentType="application/vnd.openxmlformats-officedocument.'
        'wordprocessingml.document.main+xml"/>'
        "</Types>"
    )
    package_rels = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
        '<Relationship Id="rId1" '
        'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
        'Target="word/document.xml"/>'
        "</Relationships>"
    )
    document_rels = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
        "</Relationships>"
    )
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body>"
        "</w:document>"
    )

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", content_types)
        archive.writestr("_rels/.rels", package_rels)
        archive.writestr("word/_rels/document.xml.rels", document_rels)
        archive.writestr("word/document.xml", document)
    return buffer.getvalue()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known API key and the default upload limit."""
    return Settings(api_key=TEST_API_KEY)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the valid API key."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A one-page PDF reading "Hello World"."""
    return build_pdf(["Hello World"])


@pytest.fixture
def multi_page_pdf_bytes() -> bytes:
    """A three-page PDF with one line of text per page."""
    return build_pdf(["First page", "Second page", "Third page"])


@pytest.fixture
def sample_docx_bytes() -> bytes:
    """A DOCX document with two paragraphs."""
    return build_docx(["Hello", "World"])


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Create invalid (non-PDF, non-DOCX) file bytes for testing."""
    return b"This is not a PDF file"


@pytest.fixture
def docx_factory():
    """Factory building DOCX bytes from a list of paragraphs."""
    return build_docx
