import json

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import util
from .project import ProjectNode
from .solution import SolutionDescriptor


@dataclass(frozen=True)
class SolutionFilterSolution:
    path: str  # relative to the directory holding the .slnf
    projects: tuple[str, ...]  # relative to the directory holding the .sln


@dataclass(frozen=True)
class SolutionFilter:
    solution: SolutionFilterSolution

    def to_dict(self) -> dict[str, Any]:
        return {
            "solution": {
                "path": self.solution.path,
                "projects": list(self.solution.projects),
            }
        }


def _is_loadable(node: ProjectNode) -> bool:
    return not node.is_traversal


def build_solution_filter(
        nodes: Iterable[ProjectNode],
        solution: SolutionDescriptor,
        manifest_directory: str | Path
) -> SolutionFilter:
    """
    Build the filter for `solution` listing every loadable node.

    The solution path is relative to the manifest's directory while the
    project paths are relative to the solution's directory, which is what
    the IDE expects.
    """
    solution_path = util.make_relative(manifest_directory, solution.path)
    projects = dict.fromkeys(
        util.make_relative(solution.directory, node.path)
        for node in nodes
        if _is_loadable(node)
    )
    return SolutionFilter(
        SolutionFilterSolution(solution_path, tuple(projects))
    )


def check_solution_filter(
        solution_filter: SolutionFilter,
        solution: SolutionDescriptor,
        manifest_directory: str | Path
) -> list[str]:
    """Print (and return) which of the referenced files exist."""
    lines = []
    sln_path = solution_filter.solution.path
    if not Path(manifest_directory).joinpath(sln_path).is_file():
        lines.append(f"Sln file doesn't exist: {sln_path}")
    else:
        lines.append(f"Using '{sln_path}':")

    for project in solution_filter.solution.projects:
        if not solution.directory.joinpath(project).is_file():
            lines.append(f"Project file doesn't exist: {project}")
        else:
            lines.append(f"  Discovered {project}")

    for line in lines:
        print(line)
    return lines


def write_solution_filter(
        solution_filter: SolutionFilter,
        path: str | Path
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as file:
        json.dump(solution_filter.to_dict(), file, indent=2, ensure_ascii=False)
        file.write("\n")
    return path


__all__ = [
    "SolutionFilter", "SolutionFilterSolution",
    "build_solution_filter", "check_solution_filter", "write_solution_filter"
]
