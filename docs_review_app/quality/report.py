from __future__ import annotations

from ..report.i18n import get_translator
from ..report.renderer import render
from .schemas import QualityReport


def verdict(report: QualityReport, lang: str = "zh") -> str:
    t = get_translator(lang)
    if report.overall.score >= 90:
        return t("quality.verdict_excellent")
    if report.overall.score >= 70:
        return t("quality.verdict_good")
    return t("quality.verdict_poor")


def render_quality_markdown(report: QualityReport, lang: str = "zh") -> str:
    """Markdown quality report with one section per check that was run."""
    return render(
        "quality_report.md",
        lang=lang,
        report=report,
        generated_at=report.generated_at.astimezone().strftime("%Y-%m-%d %H:%M:%S"),
        verdict=verdict(report, lang),
    )


__all__ = ["render_quality_markdown", "verdict"]
