from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import List, Sequence

from loguru import logger

from ..core.discovery import DEFAULT_EXCLUDE, discover_markdown
from ..core.errors import FileReadError
from ..report.i18n import Translator, get_translator
from .dictionary import TerminologyDictionary
from .models import DirectoryCheckResult, FixResult, Issue, Term

# Latin letters (incl. Latin-1 / Latin Extended), digits and underscore form
# words; CJK text and punctuation act as boundaries.
_WORD_CHARS = r"0-9A-Za-z_À-ɏ"


@lru_cache(maxsize=1024)
def english_pattern(english: str, ignore_case: bool = True) -> re.Pattern:
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"(?<![{_WORD_CHARS}]){re.escape(english)}(?![{_WORD_CHARS}])", flags)


def count_english(text: str, english: str) -> int:
    return len(english_pattern(english).findall(text))


def count_literal(text: str, needle: str) -> int:
    if not needle:
        return 0
    return text.count(needle)


def read_document(path: Path | str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e


class ConsistencyChecker:
    """Checks document text against a :class:`TerminologyDictionary`."""

    def __init__(self, dictionary: TerminologyDictionary, translator: Translator | None = None):
        self.dictionary = dictionary
        self.t = translator or get_translator(dictionary.lang)

    def _check_term(self, term: Term, text: str) -> List[Issue]:
        issues: List[Issue] = []
        english_count = count_english(text, term.english)
        chinese_count = count_literal(text, term.chinese)

        if term.usage == "keep_english":
            if chinese_count > 0:
                issues.append(
                    Issue(
                        type="should_keep_english",
                        term=term.english,
                        chinese=term.chinese,
                        count=chinese_count,
                        message=self.t(
                            "issue.should_keep_english",
                            term=term.english,
                            chinese=term.chinese,
                            count=chinese_count,
                        ),
                    )
                )
        elif english_count > 0 and chinese_count == 0:
            issues.append(
                Issue(
                    type="should_translate",
                    term=term.english,
                    chinese=term.chinese,
                    count=english_count,
                    message=self.t(
                        "issue.should_translate",
                        term=term.english,
                        chinese=term.chinese,
                        count=english_count,
                    ),
                )
            )

        for alt in term.alternatives:
            alt_count = count_literal(text, alt)
            if alt_count > 0:
                issues.append(
                    Issue(
                        type="alternative_used",
                        term=alt,
                        preferred=term.chinese,
                        count=alt_count,
                        message=self.t("issue.alternative_used", term=alt, preferred=term.chinese),
                    )
                )
        return issues

    def check(self, text: str) -> List[Issue]:
        """Issues for one document, in dictionary order."""
        issues: List[Issue] = []
        for term in self.dictionary:
            issues.extend(self._check_term(term, text))
        return issues

    def check_file(self, path: Path | str) -> List[Issue]:
        return self.check(read_document(path))

    def check_directory(
        self,
        root: Path | str,
        exclude: Sequence[str] = DEFAULT_EXCLUDE,
    ) -> DirectoryCheckResult:
        root_path = Path(root)
        result = DirectoryCheckResult()
        files = discover_markdown(root_path, exclude)
        for rel in files:
            try:
                issues = self.check_file(root_path / rel)
            except FileReadError as e:
                logger.warning("Skipping {}: {}", rel, e.reason)
                result.errors[rel] = e.reason
                continue
            if issues:
                result.files[rel] = issues
                result.total += len(issues)
        logger.info(
            "Checked {} files: {} issues in {} files",
            len(files),
            result.total,
            len(result.files),
        )
        return result

    # ---------- auto-fix ----------
    def fix_text(self, text: str) -> FixResult:
        """Rewrite untranslated English forms and alternatives of preferred terms."""
        changes = 0
        for term in self.dictionary:
            if term.usage != "preferred":
                continue
            text, n = english_pattern(term.english, ignore_case=False).subn(
                lambda _m, rep=term.chinese: rep, text
            )
            changes += n
            for alt in term.alternatives:
                n_alt = count_literal(text, alt)
                if n_alt:
                    text = text.replace(alt, term.chinese)
                    changes += n_alt
        return FixResult(changes=changes, content=text)

    def fix_file(self, path: Path | str, apply: bool = False) -> FixResult:
        result = self.fix_text(read_document(path))
        if apply and result.changes > 0:
            Path(path).write_text(result.content, encoding="utf-8")
            logger.info("Fixed {} terminology issues in {}", result.changes, path)
        return result


__all__ = [
    "ConsistencyChecker",
    "count_english",
    "count_literal",
    "english_pattern",
    "read_document",
]
