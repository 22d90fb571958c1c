from __future__ import annotations

from typing import Any, Dict, List

from ..report.i18n import lookup
from ..report.renderer import render
from .dictionary import TerminologyDictionary


def category_title(category: str, lang: str = "zh") -> str:
    return lookup(lang, f"category.{category}") or category


def _sections(dictionary: TerminologyDictionary, lang: str) -> List[Dict[str, Any]]:
    sections = []
    for category in dictionary.categories():
        terms = sorted(dictionary.terms_by_category(category), key=lambda t: t.english.casefold())
        if not terms:
            continue
        sections.append({"title": category_title(category, lang), "terms": terms})
    return sections


def glossary_markdown(dictionary: TerminologyDictionary, lang: str | None = None) -> str:
    lang = lang or dictionary.lang
    return render("glossary.md", lang=lang, sections=_sections(dictionary, lang))


def glossary_html(dictionary: TerminologyDictionary, lang: str | None = None) -> str:
    lang = lang or dictionary.lang
    return render("glossary.html", lang=lang, sections=_sections(dictionary, lang))


__all__ = ["glossary_markdown", "glossary_html", "category_title"]
