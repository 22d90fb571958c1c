from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from ..core.errors import DictionaryLoadError, TermNotFoundError
from ..report.i18n import get_translator
from .models import Issue, Term

YAML_EXTS = {".yml", ".yaml"}


class TerminologyDictionary:
    """Owned registry of bilingual terms backed by a JSON or YAML file.

    Keys are the case-folded English labels; iteration follows insertion
    order, which is also the order written back on save.
    """

    def __init__(self, path: Path | str | None = None, *, lang: str = "zh"):
        self.path = Path(path) if path is not None else None
        self.lang = lang
        self._terms: Dict[str, Term] = {}

    @classmethod
    def from_terms(cls, terms: Iterable[Term | Mapping[str, Any]], *, path: Path | str | None = None, lang: str = "zh") -> "TerminologyDictionary":
        d = cls(path, lang=lang)
        for raw in terms:
            term = raw if isinstance(raw, Term) else Term.model_validate(raw)
            d._terms[term.key] = term
        return d

    # ---------- persistence ----------
    def _is_yaml(self) -> bool:
        return self.path is not None and self.path.suffix.lower() in YAML_EXTS

    def load(self) -> "TerminologyDictionary":
        if self.path is None:
            raise DictionaryLoadError("no dictionary path configured")
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"cannot read dictionary {self.path}: {e}") from e
        try:
            data = yaml.safe_load(raw) if self._is_yaml() else json.loads(raw)
        except (ValueError, yaml.YAMLError) as e:
            raise DictionaryLoadError(f"dictionary {self.path} is not valid structured data: {e}") from e
        if not isinstance(data, list):
            raise DictionaryLoadError(f"dictionary {self.path} must contain a list of terms")

        terms: Dict[str, Term] = {}
        for idx, item in enumerate(data):
            try:
                term = Term.model_validate(item)
            except ValidationError as e:
                raise DictionaryLoadError(f"invalid term #{idx} in {self.path}: {e}") from e
            terms[term.key] = term
        self._terms = terms
        logger.info(
            "Loaded {} terms in {} categories from {}",
            len(self._terms),
            len(self.categories()),
            self.path,
        )
        return self

    def save(self) -> None:
        if self.path is None:
            return
        records = self.to_records()
        if self._is_yaml():
            text = yaml.safe_dump(records, allow_unicode=True, sort_keys=False)
        else:
            text = json.dumps(records, ensure_ascii=False, indent=2) + "\n"
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.debug("Saved {} terms to {}", len(self._terms), self.path)

    def to_records(self) -> List[Dict[str, Any]]:
        return [t.model_dump(exclude_unset=True) for t in self._terms.values()]

    # ---------- queries ----------
    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(list(self._terms.values()))

    def __contains__(self, english: object) -> bool:
        return isinstance(english, str) and english.casefold() in self._terms

    def lookup(self, english: str) -> Optional[Term]:
        return self._terms.get(english.casefold())

    def translation(self, english: str) -> Optional[str]:
        term = self.lookup(english)
        return term.chinese if term else None

    def should_keep_english(self, english: str) -> bool:
        term = self.lookup(english)
        return term is not None and term.usage == "keep_english"

    def alternatives(self, english: str) -> List[str]:
        term = self.lookup(english)
        return list(term.alternatives) if term else []

    def categories(self) -> List[str]:
        return sorted({t.category for t in self._terms.values()})

    def terms_by_category(self, category: str) -> List[Term]:
        return [t for t in self._terms.values() if t.category == category]

    def search(self, query: str) -> List[Term]:
        q = query.casefold()
        results = []
        for t in self._terms.values():
            if q in t.english.casefold() or query in t.chinese or (t.context and query in t.context):
                results.append(t)
        return results

    def stats(self) -> Dict[str, Any]:
        categories: Dict[str, int] = {}
        usage: Dict[str, int] = {}
        for t in self._terms.values():
            categories[t.category] = categories.get(t.category, 0) + 1
            usage[t.usage] = usage.get(t.usage, 0) + 1
        return {"total": len(self._terms), "categories": categories, "usage": usage}

    # ---------- mutations (each one persists) ----------
    def add(self, term: Term | Mapping[str, Any]) -> Term:
        term = term if isinstance(term, Term) else Term.model_validate(term)
        self._terms[term.key] = term
        self.save()
        logger.info("Added term: {} -> {}", term.english, term.chinese)
        return term

    def update(self, english: str, patch: Mapping[str, Any]) -> Term:
        key = english.casefold()
        current = self._terms.get(key)
        if current is None:
            raise TermNotFoundError(english)
        updated = Term.model_validate({**current.model_dump(exclude_unset=True), **dict(patch)})

        if updated.key == key:
            self._terms[key] = updated
        else:
            if updated.key in self._terms:
                logger.warning("Update of '{}' replaces existing term '{}'", english, updated.english)
            rebuilt: Dict[str, Term] = {}
            for k, t in self._terms.items():
                if k == key:
                    rebuilt[updated.key] = updated
                elif k != updated.key:
                    rebuilt[k] = t
            self._terms = rebuilt
        self.save()
        logger.info("Updated term: {}", english)
        return updated

    def remove(self, english: str) -> Term:
        term = self._terms.pop(english.casefold(), None)
        if term is None:
            raise TermNotFoundError(english)
        self.save()
        logger.info("Removed term: {}", english)
        return term

    # ---------- validation ----------
    def validate(self) -> List[Issue]:
        """Read-only consistency pass over the whole registry."""
        t = get_translator(self.lang)
        issues: List[Issue] = []

        seen_chinese: Dict[str, str] = {}
        for term in self._terms.values():
            first = seen_chinese.get(term.chinese)
            if first is not None:
                issues.append(
                    Issue(
                        type="duplicate_chinese",
                        term=term.english,
                        count=1,
                        chinese=term.chinese,
                        message=t(
                            "issue.duplicate_chinese",
                            chinese=term.chinese,
                            english=term.english,
                            other=first,
                        ),
                    )
                )
            else:
                seen_chinese[term.chinese] = term.english

        for term in self._terms.values():
            if not term.context.strip():
                issues.append(
                    Issue(
                        type="missing_context",
                        term=term.english,
                        count=1,
                        message=t("issue.missing_context", term=term.english),
                    )
                )
        return issues


__all__ = ["TerminologyDictionary"]
