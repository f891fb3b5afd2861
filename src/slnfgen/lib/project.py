import os
import re

import xml.dom.minidom as xml

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar, Union

from . import util
from .const import INCLUDE, PROJECT, DirectoryProperty, ItemType, is_traversal_path


_glob_chars_regexp = re.compile(r"[*?]")


def _has_glob(path: str) -> bool:
    return _glob_chars_regexp.search(path) is not None


_property_regexp = re.compile(r"\$\([^\)]*\)")


def _has_property(path: str) -> bool:
    return _property_regexp.search(path) is not None


class ProjectNode:

    def __init__(self, name: str, path: str | Path):
        self._name = name
        self._path = Path(path)

    @classmethod
    def from_path(cls, path: str | Path) -> "ProjectNode":
        path = Path(path)
        return cls(path.stem, path)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_traversal(self) -> bool:
        return is_traversal_path(self._path)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, ProjectNode) and
            self._name == other._name and
            self._path == other._path
        )

    def __hash__(self) -> int:
        return hash((self._name, self._path))

    def __str__(self):
        return f"ProjectNode({self.name}, {self.path})"


_PLO_T = TypeVar("_PLO_T")


@dataclass
class ProjectLoadOk(Generic[_PLO_T]):
    value: _PLO_T


@dataclass
class ProjectLoadDangling:
    node: ProjectNode


@dataclass
class ProjectLoadIncompatible:
    node: ProjectNode
    reason: str


_PLR_T = TypeVar("_PLR_T")


ProjectLoadResult = Union[
    ProjectLoadOk[_PLR_T],
    ProjectLoadDangling,
    ProjectLoadIncompatible
]


class ProjectXml:
    """
    The references held by a single msbuild file.

    Only `ProjectReference` and `ProjectFile` items are read. Conditions are
    ignored, so every referenced item counts.
    """

    _node: ProjectNode
    _refs: list[Path]

    # NB: external code should not construct a ProjectXml manually
    def __init__(self, node: ProjectNode):
        self._node = node
        self._refs = []

    @classmethod
    def load(cls, node: ProjectNode) -> ProjectLoadResult["ProjectXml"]:
        if not node.path.is_file():
            return ProjectLoadDangling(node)
        project_xml = cls(node)
        return project_xml._load()

    def project_refs(self) -> list[Path]:
        return list(self._refs)

    def _expand_properties(self, include: str) -> str:
        directory = self._node.path.parent
        for prop in DirectoryProperty:
            include = include.replace(prop.to_token(), prop.expand(directory))
        return include

    def _resolve_include(self, include: str) -> list[Path]:
        include = self._expand_properties(include)
        if _has_property(include):
            print(
                f"Warning: skipping {include} in {self._node.path}: "
                "unknown property"
            )
            return []
        context = self._node.path.parent
        if not _has_glob(include):
            return [util.normalize_windows_relpath(context, include)]
        # Globs are relative to the referencing file unless they were
        # anchored by a property.
        pattern = os.path.normpath(include.replace("\\", "/"))
        if Path(pattern).is_absolute():
            anchor = Path(pattern).anchor
            matches = Path(anchor).glob(pattern[len(anchor):])
        else:
            matches = context.glob(pattern)
        return sorted(
            util.normalize_windows_path(match)
            for match in matches
            if match.is_file()
        )

    def _load_project_ref(self, item: xml.Element) -> list[Path]:
        if not item.hasAttribute(INCLUDE):
            return []
        # Includes may contain more than one path, separated by semicolons
        paths = []
        for entry in item.getAttribute(INCLUDE).split(";"):
            include = entry.strip()
            if "" != include:
                paths.extend(self._resolve_include(include))
        return paths

    def _load_project_refs(self, root: xml.Document):
        for item_type in ItemType:
            for item in root.getElementsByTagName(item_type.value):
                for path in self._load_project_ref(item):
                    if path not in self._refs:
                        self._refs.append(path)

    def _load(self) -> ProjectLoadResult["ProjectXml"]:
        with xml.parse(str(self._node.path)) as root:
            project_elem = root.documentElement
            if project_elem.tagName != PROJECT:
                return ProjectLoadIncompatible(
                    self._node,
                    f"root element is <{project_elem.tagName}>, not <{PROJECT}>"
                )
            self._load_project_refs(root)
        return ProjectLoadOk(self)


__all__ = [
    "ProjectNode",
    "ProjectXml",
    "ProjectLoadOk", "ProjectLoadDangling", "ProjectLoadIncompatible",
    "ProjectLoadResult"
]
