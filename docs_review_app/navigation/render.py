from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger

from ..report.renderer import render
from .models import ROOT_KEY, FileNode, NavigationTree


def _items(tree: NavigationTree, key: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for child_key in tree.children.get(key, []):
        node = tree.nodes[child_key]
        if isinstance(node, FileNode):
            out.append({"title": node.title, "path": node.path, "type": "file", "order": node.order})
        else:
            out.append(
                {
                    "title": node.title,
                    "path": node.path,
                    "children": _items(tree, child_key),
                    "type": "directory",
                }
            )
    return out


def to_dict(tree: NavigationTree) -> Dict[str, Any]:
    return {"title": tree.root_title, "children": _items(tree, ROOT_KEY)}


def to_json(tree: NavigationTree) -> str:
    return json.dumps(to_dict(tree), ensure_ascii=False, indent=2)


def to_html(tree: NavigationTree) -> str:
    """Nested ``<ul>`` fragment: ``nav-main`` at the top, ``nav-sub`` below."""
    return render("navigation.html", items=_items(tree, ROOT_KEY)).strip()


def _collect(items: List[Dict[str, Any]], parents: List[str], out: Dict[str, List[str]]) -> None:
    for item in items:
        trail = [*parents, item["title"]]
        if item["type"] == "file":
            out[item["path"]] = trail
        if item.get("children"):
            _collect(item["children"], trail, out)


def breadcrumbs(tree: NavigationTree) -> Dict[str, List[str]]:
    """File URL -> ancestor titles (root excluded) followed by its own title."""
    out: Dict[str, List[str]] = {}
    _collect(_items(tree, ROOT_KEY), [], out)
    return out


def write_artifacts(tree: NavigationTree, out_dir: Path | str) -> Dict[str, Path]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = {
        "json": out / "navigation.json",
        "html": out / "navigation.html",
        "breadcrumbs": out / "breadcrumbs.json",
    }
    paths["json"].write_text(to_json(tree), encoding="utf-8")
    paths["html"].write_text(to_html(tree), encoding="utf-8")
    paths["breadcrumbs"].write_text(
        json.dumps(breadcrumbs(tree), ensure_ascii=False, indent=2), encoding="utf-8"
    )
    logger.info("Navigation artifacts written to {}", out)
    return paths


__all__ = ["to_dict", "to_json", "to_html", "breadcrumbs", "write_artifacts"]
