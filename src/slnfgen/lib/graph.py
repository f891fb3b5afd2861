from collections.abc import Callable, Iterable
from pathlib import Path

from . import util
from .project import (
    ProjectNode,
    ProjectXml,
    ProjectLoadOk, ProjectLoadDangling, ProjectLoadIncompatible
)


GraphLoader = Callable[[Path], Iterable[ProjectNode]]


class GraphLoadError(RuntimeError):

    def __init__(self, node: ProjectNode, reason: str):
        super().__init__(f"Couldn't load {node.path}: {reason}")
        self.node = node
        self.reason = reason


class ProjectGraph:
    """
    Every project reachable from an entry file through `ProjectReference` and
    `ProjectFile` items, the entry included.

    Nodes are kept in discovery order and are unique by path. Referenced
    files that do not exist are still nodes; they just have no references of
    their own.
    """

    _entry: ProjectNode
    _nodes: list[ProjectNode]
    _seen: set[Path]
    _dangling: set[ProjectNode]

    def __init__(self, entry: str | Path):
        self._entry = ProjectNode.from_path(util.absolute_path(entry))
        self._nodes = []
        self._seen = set()
        self._dangling = set()
        self._load()

    def _load(self):
        pending = [self._entry]
        while len(pending) > 0:
            node = pending.pop()
            if node.path in self._seen:
                continue
            self._seen.add(node.path)
            self._nodes.append(node)

            match ProjectXml.load(node):
                case ProjectLoadOk(project_xml):
                    # reversed so the first reference is visited first
                    for path in reversed(project_xml.project_refs()):
                        if path not in self._seen:
                            pending.append(ProjectNode.from_path(path))
                case ProjectLoadDangling(_):
                    self._dangling.add(node)
                case ProjectLoadIncompatible(_, reason):
                    raise GraphLoadError(node, reason)

    def nodes(self) -> tuple[ProjectNode, ...]:
        return tuple(self._nodes)

    def dangling(self) -> frozenset[ProjectNode]:
        return frozenset(self._dangling)

    def __str__(self):
        return f"ProjectGraph({self._entry.path})"


def load_graph(entry: str | Path) -> list[ProjectNode]:
    return list(ProjectGraph(entry).nodes())


__all__ = ["GraphLoader", "GraphLoadError", "ProjectGraph", "load_graph"]
