"""
Run the text extraction service with uvicorn.

Usage:
    python -m app.text_extractor
"""

import uvicorn

from .config import get_settings


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.text_extractor.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
