"""
Document Text Extractor Application.

A small FastAPI service that extracts plain text from uploaded
PDF and DOCX documents and returns it as JSON.
"""

__version__ = "1.0.0"
