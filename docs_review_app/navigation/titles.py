from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from ..report.i18n import get_translator, lookup
from .models import DEFAULT_ORDER

CANONICAL_SECTIONS = [
    "getting-started",
    "concepts",
    "factors",
    "tutorials",
    "tools",
    "best-practices",
    "community",
]
_CANONICAL_INDEX = {name: i for i, name in enumerate(CANONICAL_SECTIONS)}

SPECIAL_ORDER: Dict[str, int] = {
    "introduction": 1,
    "installation": 2,
    "first-agent": 3,
    "overview": 1,
    "terminology": 2,
    "agent-architecture": 3,
}

INDEX_NAMES = {"readme.md", "index.md"}

_FACTOR_ORDER_RE = re.compile(r"factor-(\d+)")
_FACTOR_TITLE_RE = re.compile(r"factor-(\d+)-(.+)")
_H1_RE = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
_WORD_START_RE = re.compile(r"\b\w")


def is_index_document(filename: str) -> bool:
    return filename.lower() in INDEX_NAMES


def capitalize_words(text: str) -> str:
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), text)


def format_title(name: str, lang: str = "zh") -> str:
    label = lookup(lang, f"nav.label.{name}")
    if label:
        return label

    m = _FACTOR_TITLE_RE.search(name)
    if m:
        rest = capitalize_words(m.group(2).replace("-", " "))
        return get_translator(lang)("nav.factor_title", num=m.group(1), title=rest)

    return capitalize_words(name.replace("-", " "))


def file_order(stem: str) -> int:
    if stem in SPECIAL_ORDER:
        return SPECIAL_ORDER[stem]
    m = _FACTOR_ORDER_RE.search(stem)
    if m:
        return int(m.group(1))
    return DEFAULT_ORDER


def extract_title(text: str) -> Optional[str]:
    """First level-1 ATX heading, or None."""
    m = _H1_RE.search(text)
    if m:
        title = m.group(1).strip()
        return title or None
    return None


def section_rank(name: str) -> Tuple[int, int, str]:
    """Sort key: canonical sections first, in their fixed order, then alphabetical."""
    if name in _CANONICAL_INDEX:
        return (0, _CANONICAL_INDEX[name], "")
    return (1, 0, name)


__all__ = [
    "CANONICAL_SECTIONS",
    "SPECIAL_ORDER",
    "capitalize_words",
    "extract_title",
    "file_order",
    "format_title",
    "is_index_document",
    "section_rank",
]
