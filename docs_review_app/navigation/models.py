from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Union

DEFAULT_ORDER = 999
ROOT_KEY = ""


@dataclass
class DirectoryNode:
    title: str
    path: str
    source: str
    name: str
    kind: Literal["directory"] = "directory"


@dataclass
class FileNode:
    title: str
    path: str
    source: str
    name: str
    order: int = DEFAULT_ORDER
    kind: Literal["file"] = "file"


NavigationNode = Union[DirectoryNode, FileNode]


def directory_key(prefix: str) -> str:
    return f"{prefix}/" if prefix else ROOT_KEY


@dataclass
class NavigationTree:
    """Arena of navigation nodes.

    ``nodes`` is keyed by path: a file by its relative path, a directory by
    its prefix plus a trailing slash (see :func:`directory_key`), so a file
    and a directory with the same name never share a key. ``children`` maps a
    directory key to its ordered child keys. The root directory uses the
    empty key.
    """

    root_title: str
    nodes: Dict[str, NavigationNode] = field(default_factory=dict)
    children: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if ROOT_KEY not in self.nodes:
            self.nodes[ROOT_KEY] = DirectoryNode(title=self.root_title, path="/", source="", name="")
            self.children.setdefault(ROOT_KEY, [])

    @property
    def root(self) -> DirectoryNode:
        node = self.nodes[ROOT_KEY]
        assert isinstance(node, DirectoryNode)
        return node

    def child_nodes(self, key: str = ROOT_KEY) -> List[NavigationNode]:
        return [self.nodes[k] for k in self.children.get(key, [])]

    def walk_files(self, key: str = ROOT_KEY) -> Iterator[FileNode]:
        for child_key in self.children.get(key, []):
            node = self.nodes[child_key]
            if isinstance(node, FileNode):
                yield node
            else:
                yield from self.walk_files(child_key)


__all__ = [
    "DirectoryNode",
    "FileNode",
    "NavigationNode",
    "NavigationTree",
    "DEFAULT_ORDER",
    "ROOT_KEY",
    "directory_key",
]
