"""Bilingual terminology dictionary, consistency checker and glossary export."""
from .checker import ConsistencyChecker
from .dictionary import TerminologyDictionary
from .glossary import glossary_html, glossary_markdown
from .models import DirectoryCheckResult, FixResult, Issue, Term

__all__ = [
    "ConsistencyChecker",
    "TerminologyDictionary",
    "DirectoryCheckResult",
    "FixResult",
    "Issue",
    "Term",
    "glossary_html",
    "glossary_markdown",
]
