from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

from .core.discovery import DEFAULT_EXCLUDE
from .core.errors import DocsReviewError

ALLOWED_LANGS = {"zh", "en"}
DEFAULT_ROOT_TITLE = "12-Factor Agents"


@dataclass
class DocsConfig:
    source_dir: Path = field(default_factory=lambda: Path("."))
    dictionary_path: Optional[Path] = None
    output_dir: Optional[Path] = None
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    nav_exclude: List[str] = field(
        default_factory=lambda: [*DEFAULT_EXCLUDE, "scripts/**"]
    )
    lang: str = "zh"
    root_title: str = DEFAULT_ROOT_TITLE
    report_path: Optional[Path] = None

    def __post_init__(self) -> None:
        self.source_dir = Path(self.source_dir)
        if self.dictionary_path is None:
            self.dictionary_path = self.source_dir / "config" / "terminology.json"
        if self.output_dir is None:
            self.output_dir = self.source_dir / "dist"
        if self.report_path is None:
            self.report_path = self.source_dir / "quality-report.md"
        if self.lang not in ALLOWED_LANGS:
            logger.warning("Unsupported lang {!r}; falling back to 'zh'", self.lang)
            self.lang = "zh"


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise DocsReviewError(f"cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise DocsReviewError(f"config {path} must be a mapping")
    return data


def load_config(path: Path | str | None = None, *, source_dir: Path | str | None = None) -> DocsConfig:
    """Build a :class:`DocsConfig` from an optional YAML file and the environment.

    A relative ``source`` in the file resolves against the file's directory;
    the other relative paths resolve against the source directory.
    ``source_dir`` wins over ``DOCS_REVIEW_SOURCE``, which wins over the file.
    ``DOCS_REVIEW_DICTIONARY`` and ``DOCS_REVIEW_LANG`` override file values.
    """
    data: Dict[str, Any] = {}
    base = Path(".")
    if path is not None:
        cfg_path = Path(path)
        data = _read_yaml(cfg_path)
        base = cfg_path.parent
        logger.debug("Loaded config from {}", cfg_path)

    build = data.get("build") or {}
    term = data.get("terminology") or {}
    nav = data.get("navigation") or {}

    src = source_dir or os.getenv("DOCS_REVIEW_SOURCE")
    if src:
        src_path = Path(src)
    elif data.get("source"):
        src_path = base / str(data["source"])
    else:
        src_path = base

    def _resolve(value: Any) -> Optional[Path]:
        if not value:
            return None
        p = Path(value)
        return p if p.is_absolute() else src_path / p

    cfg = DocsConfig(
        source_dir=src_path,
        dictionary_path=_resolve(os.getenv("DOCS_REVIEW_DICTIONARY") or term.get("dictionary")),
        output_dir=_resolve(build.get("outputDir")),
        lang=(os.getenv("DOCS_REVIEW_LANG") or data.get("lang") or "zh").strip().lower(),
        root_title=str(nav.get("rootTitle") or DEFAULT_ROOT_TITLE),
        report_path=_resolve(data.get("report")),
    )
    if term.get("exclude"):
        cfg.exclude = [str(x) for x in term["exclude"]]
    if nav.get("exclude"):
        cfg.nav_exclude = [str(x) for x in nav["exclude"]]
    return cfg


__all__ = ["DocsConfig", "load_config", "ALLOWED_LANGS", "DEFAULT_ROOT_TITLE"]
