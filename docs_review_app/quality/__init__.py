"""Quality scoring over terminology, link and code-block checks."""
from .compute import grade_for, score
from .runner import QualityRunner
from .schemas import (
    CodeResult,
    LinkResult,
    OverallResult,
    QualityReport,
    TerminologyResult,
)

__all__ = [
    "score",
    "grade_for",
    "QualityRunner",
    "CodeResult",
    "LinkResult",
    "OverallResult",
    "QualityReport",
    "TerminologyResult",
]
