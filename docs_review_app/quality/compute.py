from __future__ import annotations

import math
from typing import Optional

from .schemas import CodeResult, Grade, LinkResult, OverallResult, TerminologyResult

TERMINOLOGY_WEIGHT = 30
LINKS_WEIGHT = 40
CODE_WEIGHT = 30
PASS_SCORE = 90


def _clamp(v: float, hi: float) -> float:
    if v < 0.0:
        return 0.0
    if v > hi:
        return hi
    return v


def terminology_points(result: TerminologyResult, weight: int = TERMINOLOGY_WEIGHT) -> float:
    """Each issue costs 2 points, up to the full weight."""
    if result.total_issues <= 0:
        return float(weight)
    deduction = min(weight, result.total_issues * 2)
    return float(max(0, weight - deduction))


def link_points(result: LinkResult, weight: int = LINKS_WEIGHT) -> float:
    if result.broken_links <= 0 or result.total_links <= 0:
        return float(weight)
    ratio = result.broken_links / result.total_links
    return _clamp(weight * (1 - ratio), weight)


def code_points(result: CodeResult, weight: int = CODE_WEIGHT) -> float:
    if result.total_code_blocks <= 0:
        return float(weight)
    ratio = result.valid_code_blocks / result.total_code_blocks
    return _clamp(weight * ratio, weight)


def grade_for(score: int) -> Grade:
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def score(
    terminology: Optional[TerminologyResult],
    links: Optional[LinkResult],
    code: Optional[CodeResult],
) -> OverallResult:
    """Weighted 0..100 score over whichever checks were run.

    A ``None`` input means that check was skipped; its weight is left out of
    the maximum. Rounding is half-up.
    """
    total = 0.0
    max_score = 0
    if terminology is not None:
        total += terminology_points(terminology)
        max_score += TERMINOLOGY_WEIGHT
    if links is not None:
        total += link_points(links)
        max_score += LINKS_WEIGHT
    if code is not None:
        total += code_points(code)
        max_score += CODE_WEIGHT

    final = int(math.floor(100 * total / max_score + 0.5)) if max_score else 0
    return OverallResult(passed=final >= PASS_SCORE, score=final, grade=grade_for(final))


__all__ = [
    "score",
    "grade_for",
    "terminology_points",
    "link_points",
    "code_points",
    "TERMINOLOGY_WEIGHT",
    "LINKS_WEIGHT",
    "CODE_WEIGHT",
    "PASS_SCORE",
]
