from __future__ import annotations

from typing import Dict, List

from ..report.i18n import get_translator
from .models import DirectoryCheckResult

ISSUE_ICONS = {
    "should_keep_english": "🔤",
    "should_translate": "🔄",
    "alternative_used": "⚠️",
}


def type_counts(result: DirectoryCheckResult) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for issues in result.files.values():
        for issue in issues:
            stats[issue.type] = stats.get(issue.type, 0) + 1
    return stats


def format_check_report(result: DirectoryCheckResult, lang: str = "zh") -> str:
    """Plain-text report of a directory check, one block per file."""
    t = get_translator(lang)
    lines: List[str] = ["", f"📋 {t('check.title')}", "=" * 50]

    if result.errors:
        lines.append(f"⚠️ {t('check.read_errors', count=len(result.errors))}")
        for path, reason in result.errors.items():
            lines.append(f"  {path}: {reason}")
        lines.append("")

    if result.total == 0:
        lines.append(f"✅ {t('check.all_passed')}")
        return "\n".join(lines)

    lines.append(f"❌ {t('check.found', total=result.total)}")
    lines.append("")
    for path, issues in result.files.items():
        lines.append(f"📄 {path}:")
        for issue in issues:
            lines.append(f"  {ISSUE_ICONS.get(issue.type, '❓')} {issue.message}")
        lines.append("")

    lines.append(f"📊 {t('check.type_stats')}")
    for issue_type, count in type_counts(result).items():
        lines.append("  " + t("check.type_count", desc=t(f"issue_type.{issue_type}"), count=count))
    return "\n".join(lines)


__all__ = ["format_check_report", "type_counts", "ISSUE_ICONS"]
