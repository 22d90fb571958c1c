from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import unquote

from loguru import logger

from ..core.errors import FileReadError
from ..terminology.checker import read_document
from .schemas import BrokenLink, LinkResult

_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
_SKIP_PREFIXES = ("http", "#", "mailto:")


def extract_links(text: str) -> List[Tuple[str, str]]:
    """(text, url) pairs for every inline Markdown link, images included."""
    out = []
    for m in _LINK_RE.finditer(text):
        url = m.group(2).strip()
        # drop an optional "title" after the target
        url = url.split()[0] if url else url
        out.append((m.group(1), url))
    return out


def resolve_target(doc_path: Path, url: str, root: Path) -> Optional[Path]:
    """Filesystem target for an internal link, or None for an in-page anchor."""
    target = url.split("#", 1)[0].split("?", 1)[0]
    if not target:
        return None
    target = unquote(target)
    if target.startswith("/"):
        return root / target.lstrip("/")
    return doc_path.parent / target


def check_links(
    root: Path | str,
    files: Iterable[str],
    diagnostics: Optional[Dict[str, str]] = None,
) -> LinkResult:
    root_path = Path(root)
    total = 0
    broken = 0
    details: Dict[str, List[BrokenLink]] = {}

    for rel in files:
        doc = root_path / rel
        try:
            text = read_document(doc)
        except FileReadError as e:
            logger.warning("Skipping {}: {}", rel, e.reason)
            if diagnostics is not None:
                diagnostics[rel] = e.reason
            continue

        file_links: List[BrokenLink] = []
        for link_text, url in extract_links(text):
            total += 1
            if url.startswith(_SKIP_PREFIXES):
                continue
            target = resolve_target(doc, url, root_path)
            if target is None or target.exists():
                continue
            broken += 1
            file_links.append(BrokenLink(text=link_text, url=url, type="internal"))
        if file_links:
            details[rel] = file_links

    logger.info("Checked {} links: {} broken", total, broken)
    return LinkResult(passed=broken == 0, total_links=total, broken_links=broken, details=details)


__all__ = ["check_links", "extract_links", "resolve_target"]
