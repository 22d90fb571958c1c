# docs_review_app/report/renderer.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape
from loguru import logger

from .i18n import get_translator

_ENV: Environment | None = None


def _build_env(template_root: Path | None = None) -> Environment:
    """
    Jinja2 loader with several search paths:
    1) (opt.) template_root, so a site can override any template
    2) package path: <this_file_dir>/templates
    """
    search_paths = [str(Path(__file__).parent / "templates")]
    if template_root:
        search_paths.insert(0, str(template_root))

    logger.debug("Jinja2 search paths: {}", search_paths)

    loader = ChoiceLoader([FileSystemLoader(p) for p in search_paths])
    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"]),
        enable_async=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render(template_name: str, lang: str = "zh", template_root: Path | None = None, **context: Any) -> str:
    """Render a packaged template with the translator exposed as ``t``."""
    global _ENV
    if template_root is not None:
        env = _build_env(template_root)
    else:
        if _ENV is None:
            _ENV = _build_env()
        env = _ENV
    template = env.get_template(template_name)
    return template.render(t=get_translator(lang), lang=lang, **context)


__all__ = ["render"]
