"""
Routers package for FastAPI endpoints.

- extract: Document text extraction
"""

from . import extract

__all__ = ["extract"]
