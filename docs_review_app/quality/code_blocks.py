from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import yaml
from loguru import logger

from ..core.errors import FileReadError, MalformedStructuredContent
from ..report.i18n import Translator, get_translator
from ..terminology.checker import read_document
from .schemas import CodeBlockIssue, CodeResult

_FENCE_RE = re.compile(r"```(\w+)?\n([\s\S]*?)```")
_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = set(_PAIRS.values())
BRACE_LANGS = {"javascript", "typescript", "js", "ts"}
SHELL_LANGS = {"bash", "shell", "sh"}
SNIPPET_LEN = 100


def extract_code_blocks(text: str) -> List[Tuple[str, str]]:
    """(language, code) for each fenced block; untagged blocks are ``text``."""
    return [((m.group(1) or "text"), m.group(2)) for m in _FENCE_RE.finditer(text)]


def has_matching_braces(code: str) -> bool:
    stack: List[str] = []
    for ch in code:
        if ch in _PAIRS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or _PAIRS[stack.pop()] != ch:
                return False
    return not stack


def parse_structured(language: str, code: str) -> None:
    """Parse a JSON/YAML block, raising MalformedStructuredContent on failure."""
    try:
        if language == "json":
            json.loads(code)
        else:
            yaml.safe_load(code)
    except (ValueError, yaml.YAMLError) as e:
        raise MalformedStructuredContent(language, str(e)) from e


def validate_code_block(language: str, code: str, t: Optional[Translator] = None) -> List[str]:
    t = t or get_translator("zh")
    lang = (language or "text").lower()
    if not code.strip():
        return [t("code.empty")]

    issues: List[str] = []
    if lang in BRACE_LANGS:
        if not has_matching_braces(code):
            issues.append(t("code.unbalanced"))
    elif lang in {"json", "yaml", "yml"}:
        try:
            parse_structured("json" if lang == "json" else "yaml", code)
        except MalformedStructuredContent as e:
            logger.debug("{}", e)
            issues.append(t("code.bad_json" if lang == "json" else "code.bad_yaml"))
    elif lang in SHELL_LANGS:
        if "rm -rf /" in code:
            issues.append(t("code.dangerous"))
    return issues


def check_code_blocks(
    root: Path | str,
    files: Iterable[str],
    lang: str = "zh",
    diagnostics: Optional[Dict[str, str]] = None,
) -> CodeResult:
    root_path = Path(root)
    t = get_translator(lang)
    total = 0
    valid = 0
    per_file: Dict[str, List[CodeBlockIssue]] = {}

    for rel in files:
        try:
            text = read_document(root_path / rel)
        except FileReadError as e:
            logger.warning("Skipping {}: {}", rel, e.reason)
            if diagnostics is not None:
                diagnostics[rel] = e.reason
            continue

        file_issues: List[CodeBlockIssue] = []
        for language, code in extract_code_blocks(text):
            total += 1
            problems = validate_code_block(language, code, t)
            if not problems:
                valid += 1
                continue
            file_issues.append(
                CodeBlockIssue(language=language, issues=problems, code=code[:SNIPPET_LEN] + "...")
            )
        if file_issues:
            per_file[rel] = file_issues

    logger.info("Checked {} code blocks: {} valid", total, valid)
    return CodeResult(
        passed=not per_file,
        total_code_blocks=total,
        valid_code_blocks=valid,
        issues=per_file,
    )


__all__ = [
    "check_code_blocks",
    "extract_code_blocks",
    "has_matching_braces",
    "parse_structured",
    "validate_code_block",
]
