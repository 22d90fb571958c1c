from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List, Sequence

DEFAULT_EXCLUDE = ("node_modules/**", "dist/**")
MARKDOWN_GLOB = "**/*.md"


def is_excluded(rel_path: str, exclude: Iterable[str]) -> bool:
    """Return True when the POSIX relative path matches any exclude glob.

    ``dir/**`` also matches the directory itself and everything below it.
    """
    for pattern in exclude:
        if fnmatch(rel_path, pattern):
            return True
        if pattern.endswith("/**") and (
            rel_path == pattern[:-3] or rel_path.startswith(pattern[:-2])
        ):
            return True
    return False


def discover_markdown(
    root: Path | str,
    exclude: Sequence[str] = DEFAULT_EXCLUDE,
    pattern: str = MARKDOWN_GLOB,
) -> List[str]:
    """List Markdown documents below ``root`` as sorted POSIX relative paths."""
    root_path = Path(root)
    found: List[str] = []
    for path in root_path.glob(pattern):
        if not path.is_file():
            continue
        rel = path.relative_to(root_path).as_posix()
        if is_excluded(rel, exclude):
            continue
        found.append(rel)
    return sorted(found)


__all__ = ["DEFAULT_EXCLUDE", "MARKDOWN_GLOB", "discover_markdown", "is_excluded"]
