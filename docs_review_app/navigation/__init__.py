"""Navigation tree builder and its JSON / HTML / breadcrumb renderers."""
from .builder import NavigationTreeBuilder
from .models import DirectoryNode, FileNode, NavigationNode, NavigationTree
from .render import breadcrumbs, to_dict, to_html, to_json, write_artifacts
from .titles import format_title

__all__ = [
    "NavigationTreeBuilder",
    "NavigationTree",
    "NavigationNode",
    "DirectoryNode",
    "FileNode",
    "breadcrumbs",
    "format_title",
    "to_dict",
    "to_html",
    "to_json",
    "write_artifacts",
]
