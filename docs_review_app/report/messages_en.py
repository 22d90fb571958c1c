# All UI strings for English locale
MESSAGES = {
    # Terminology issues
    "issue.should_keep_english": 'Term "{term}" should stay in English, but the Chinese form "{chinese}" appears {count} time(s)',
    "issue.should_translate": 'Term "{term}" should be translated as "{chinese}"; found {count} untranslated occurrence(s)',
    "issue.alternative_used": 'Alternative "{term}" used; prefer the standard term "{preferred}"',
    "issue.duplicate_chinese": 'Chinese term "{chinese}" maps to several English terms: {english}, {other}',
    "issue.missing_context": 'Term "{term}" has no context note',
    "issue_type.should_keep_english": "Should stay English",
    "issue_type.should_translate": "Should be translated",
    "issue_type.alternative_used": "Alternative used",
    "issue_type.duplicate_chinese": "Duplicate Chinese translation",
    "issue_type.missing_context": "Missing context",
    # Terminology console report
    "check.title": "Terminology consistency report",
    "check.all_passed": "All files use terminology consistently!",
    "check.found": "Found {total} terminology issue(s):",
    "check.type_stats": "Issues by type:",
    "check.type_count": "{desc}: {count}",
    "check.read_errors": "Could not read {count} file(s):",
    "fix.preview": "Dry run: {changes} issue(s) would be fixed",
    "fix.hint": "Pass --apply to write the changes",
    "fix.applied": "Fixed {changes} terminology issue(s) in {path}",
    "validate.passed": "Dictionary validation passed",
    "validate.failed": "Found {count} issue(s):",
    # Glossary
    "glossary.title": "Glossary",
    "glossary.translation": "Chinese",
    "glossary.context": "Context",
    "glossary.alternatives": "Alternatives",
    "glossary.usage": "Usage",
    "glossary.keep_english": "Keep in English",
    "category.technical": "Technical terms",
    "category.concept": "Concepts",
    "category.tool": "Tools",
    # Quality report
    "quality.title": "Documentation quality report",
    "quality.generated_at": "Generated at",
    "quality.overall": "Overall score",
    "quality.passed": "Passed",
    "quality.failed": "Failed",
    "quality.terminology": "Terminology consistency",
    "quality.terminology_ok": "All terms are used consistently",
    "quality.terminology_issues": "{count} issue(s) found",
    "quality.links": "Link validity",
    "quality.links_ok": "Checked {total} link(s), all valid",
    "quality.links_broken": "{broken}/{total} link(s) broken",
    "quality.link_internal": "broken internal link",
    "quality.link_external": "broken external link",
    "quality.code": "Code examples",
    "quality.code_ok": "Checked {total} code block(s), all valid",
    "quality.code_issues": "{valid}/{total} code block(s) valid",
    "quality.code_block": "code block issues",
    "quality.verdict_excellent": "Documentation quality is excellent!",
    "quality.verdict_good": "Documentation quality is good, with room to improve",
    "quality.verdict_poor": "Documentation quality needs work",
    "code.empty": "empty code block",
    "code.unbalanced": "unbalanced brackets",
    "code.bad_json": "invalid JSON",
    "code.bad_yaml": "invalid YAML",
    "code.dangerous": "dangerous command",
    # Navigation labels
    "nav.factor_title": "Factor {num}: {title}",
    "nav.label.getting-started": "Getting Started",
    "nav.label.concepts": "Core Concepts",
    "nav.label.factors": "The 12 Factors",
    "nav.label.tutorials": "Tutorials",
    "nav.label.tools": "Tools",
    "nav.label.best-practices": "Best Practices",
    "nav.label.community": "Community",
    "nav.label.workshop": "Workshop",
    "nav.label.examples": "Examples",
    "nav.label.advanced": "Advanced",
    "nav.label.introduction": "Introduction",
    "nav.label.installation": "Installation",
    "nav.label.first-agent": "Your First Agent",
    "nav.label.overview": "Overview",
    "nav.label.terminology": "Terminology",
    "nav.label.agent-architecture": "Agent Architecture",
}
