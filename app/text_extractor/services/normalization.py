"""
Whitespace normalization for extracted text.
"""

import re

_BLANK_LINE_RUNS = re.compile(r"\n{3,}")
_HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")


def normalize_text(text: str) -> str:
    """
    Clean up raw extracted text.

    Collapses three or more consecutive newlines to a single blank line,
    collapses runs of spaces and tabs to one space, and trims the result.

    Args:
        text: Raw text from a document extractor.

    Returns:
        The normalized text.
    """
    text = _BLANK_LINE_RUNS.sub("\n\n", text)
    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    return text.strip()
