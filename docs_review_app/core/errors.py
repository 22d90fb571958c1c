"""Exceptions raised by the docs review toolkit."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class DocsReviewError(Exception):
    """Base class for all toolkit errors."""

    pass


class DictionaryLoadError(DocsReviewError):
    """Raised when the terminology dictionary cannot be established.

    Fatal: callers must not continue with a partially usable checker.
    """

    pass


class TermNotFoundError(DocsReviewError):
    """Raised by update/remove when the English key is not registered."""

    def __init__(self, english: str):
        self.english = english
        super().__init__(f"term '{english}' not found")


class FileReadError(DocsReviewError):
    """Raised when a single document cannot be read.

    Directory scans catch it, record it and move on to the next file.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class MalformedStructuredContent(DocsReviewError):
    """JSON/YAML code block that does not parse.

    Only used inside code-block validation, where it is turned into an issue.
    """

    def __init__(self, language: str, detail: str = ""):
        self.language = language
        self.detail = detail
        super().__init__(f"malformed {language} content: {detail}".rstrip(": "))


__all__ = [
    "DocsReviewError",
    "DictionaryLoadError",
    "TermNotFoundError",
    "FileReadError",
    "MalformedStructuredContent",
]
