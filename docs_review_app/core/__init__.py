"""Shared building blocks: errors and corpus discovery."""
from .discovery import DEFAULT_EXCLUDE, discover_markdown, is_excluded
from .errors import (
    DictionaryLoadError,
    DocsReviewError,
    FileReadError,
    MalformedStructuredContent,
    TermNotFoundError,
)

__all__ = [
    "DEFAULT_EXCLUDE",
    "discover_markdown",
    "is_excluded",
    "DocsReviewError",
    "DictionaryLoadError",
    "TermNotFoundError",
    "FileReadError",
    "MalformedStructuredContent",
]
