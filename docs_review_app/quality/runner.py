from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

from loguru import logger

from ..config import DocsConfig
from ..core.discovery import discover_markdown
from ..terminology.checker import ConsistencyChecker
from ..terminology.dictionary import TerminologyDictionary
from .code_blocks import check_code_blocks
from .compute import score
from .links import check_links
from .schemas import CodeResult, LinkResult, QualityReport, TerminologyResult


class QualityRunner:
    """Runs terminology, link and code checks over one corpus and scores them."""

    def __init__(self, config: DocsConfig):
        self.config = config
        self.diagnostics: Dict[str, str] = {}

    def _files(self) -> List[str]:
        return discover_markdown(self.config.source_dir, self.config.exclude)

    def check_terminology(self) -> TerminologyResult:
        logger.info("Checking terminology consistency...")
        dictionary = TerminologyDictionary(self.config.dictionary_path, lang=self.config.lang).load()
        result = ConsistencyChecker(dictionary).check_directory(self.config.source_dir, self.config.exclude)
        self.diagnostics.update(result.errors)
        return TerminologyResult(passed=result.total == 0, total_issues=result.total, files=result.files)

    def check_links(self) -> LinkResult:
        logger.info("Checking links...")
        return check_links(self.config.source_dir, self._files(), self.diagnostics)

    def check_code(self) -> CodeResult:
        logger.info("Checking code examples...")
        return check_code_blocks(self.config.source_dir, self._files(), self.config.lang, self.diagnostics)

    def run(self) -> QualityReport:
        self.diagnostics = {}
        terminology = self.check_terminology()
        links = self.check_links()
        code = self.check_code()
        overall = score(terminology, links, code)
        logger.info("Overall quality score: {}/100 ({})", overall.score, overall.grade)
        return QualityReport(
            generated_at=datetime.now(timezone.utc),
            terminology=terminology,
            links=links,
            code=code,
            overall=overall,
            diagnostics=dict(self.diagnostics),
        )


def write_report(text: str, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Quality report saved to {}", path)
    return path


__all__ = ["QualityRunner", "write_report"]
