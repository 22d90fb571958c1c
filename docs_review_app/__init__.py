"""
docs-review: terminology consistency, navigation and quality tooling for
bilingual (English / Chinese) Markdown documentation.

Public API:
  - TerminologyDictionary, ConsistencyChecker
  - NavigationTreeBuilder
  - score, QualityRunner
"""

from __future__ import annotations

from .navigation import NavigationTreeBuilder
from .quality import QualityRunner, score
from .terminology import ConsistencyChecker, Issue, Term, TerminologyDictionary

__version__ = "0.1.0"

__all__ = [
    "TerminologyDictionary",
    "ConsistencyChecker",
    "NavigationTreeBuilder",
    "QualityRunner",
    "Issue",
    "Term",
    "score",
    "__version__",
]
