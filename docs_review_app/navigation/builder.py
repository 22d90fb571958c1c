from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Iterable, Optional

from loguru import logger

from ..config import DEFAULT_ROOT_TITLE
from ..core.errors import FileReadError
from ..terminology.checker import read_document
from .models import ROOT_KEY, DirectoryNode, FileNode, NavigationTree, directory_key
from .titles import extract_title, file_order, format_title, is_index_document, section_rank

TextReader = Callable[[str], str]


def normalize_path(path: str) -> str:
    p = str(path).replace("\\", "/").strip()
    while p.startswith("./"):
        p = p[2:]
    return "/".join(part for part in p.split("/") if part)


def page_url(rel_path: str) -> str:
    """Published URL of a source document (``.md`` -> ``.html``)."""
    p = PurePosixPath(rel_path)
    if p.suffix.lower() == ".md":
        p = p.with_suffix(".html")
    return f"/{p.as_posix()}"


class NavigationTreeBuilder:
    """Turns a flat set of relative Markdown paths into a :class:`NavigationTree`.

    Titles come from each document's first H1 when the text can be read
    (``source_dir`` or ``read_text``); otherwise from :func:`format_title`.
    """

    def __init__(
        self,
        source_dir: Path | str | None = None,
        *,
        lang: str = "zh",
        root_title: str = DEFAULT_ROOT_TITLE,
        read_text: Optional[TextReader] = None,
    ):
        self.source_dir = Path(source_dir) if source_dir is not None else None
        self.lang = lang
        self.root_title = root_title
        self._read_text = read_text

    def _document_title(self, rel_path: str) -> Optional[str]:
        if self._read_text is not None:
            reader = self._read_text
        elif self.source_dir is not None:
            base = self.source_dir

            def reader(rel: str) -> str:
                return read_document(base / rel)
        else:
            return None
        try:
            return extract_title(reader(rel_path))
        except (FileReadError, OSError, KeyError) as e:
            logger.debug("No title for {}: {}", rel_path, e)
            return None

    def _ensure_directory(self, tree: NavigationTree, parts: list) -> str:
        parent = ROOT_KEY
        for i, segment in enumerate(parts):
            prefix = "/".join(parts[: i + 1])
            key = directory_key(prefix)
            if not isinstance(tree.nodes.get(key), DirectoryNode):
                tree.nodes[key] = DirectoryNode(
                    title=format_title(segment, self.lang),
                    path=f"/{prefix}/",
                    source=prefix,
                    name=segment,
                )
                tree.children[key] = []
                tree.children[parent].append(key)
            parent = key
        return parent

    def _sort_children(self, tree: NavigationTree) -> None:
        for key, child_keys in tree.children.items():
            by_section = sorted(child_keys, key=lambda k: section_rank(tree.nodes[k].name))

            def placement(k: str):
                node = tree.nodes[k]
                if isinstance(node, FileNode):
                    return (1, node.order)
                return (0, 0)

            tree.children[key] = sorted(by_section, key=placement)

    def build(self, paths: Iterable[str]) -> NavigationTree:
        tree = NavigationTree(root_title=self.root_title)
        index_docs: Dict[str, str] = {}

        for rel in sorted({normalize_path(p) for p in paths}):
            if not rel:
                continue
            parts = rel.split("/")
            dir_key = self._ensure_directory(tree, parts[:-1])
            filename = parts[-1]

            if is_index_document(filename):
                index_docs[dir_key] = rel
                continue

            stem = PurePosixPath(filename).stem
            if rel not in tree.nodes:
                tree.children[dir_key].append(rel)
            tree.nodes[rel] = FileNode(
                title=self._document_title(rel) or format_title(stem, self.lang),
                path=page_url(rel),
                source=rel,
                name=stem,
                order=file_order(stem),
            )

        for dir_key, rel in index_docs.items():
            if dir_key == ROOT_KEY:
                continue
            title = self._document_title(rel)
            if title:
                tree.nodes[dir_key].title = title

        self._sort_children(tree)
        logger.debug("Navigation tree: {} nodes", len(tree.nodes))
        return tree


__all__ = ["NavigationTreeBuilder", "normalize_path", "page_url"]
