from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import util
from .const import SOLUTION_EXTENSION


class SolutionNotFoundError(RuntimeError):

    def __init__(self, start_directory: Path):
        super().__init__(
            f"Couldn't find a {SOLUTION_EXTENSION} above {start_directory}"
        )
        self.start_directory = start_directory


@dataclass(frozen=True)
class SolutionDescriptor:
    path: Path

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self):
        return f"Solution({self.path})"


def _solutions_in(directory: Path) -> list[Path]:
    return sorted(
        path
        for path in directory.glob("*" + SOLUTION_EXTENSION)
        if path.is_file()
    )


def locate_solution(
        start_directory: str | Path,
        explicit_path: Optional[str | Path] = None
) -> SolutionDescriptor:
    """
    Find the solution a run should use.

    An explicit path is taken as is (made absolute, never searched for or
    checked). Otherwise the nearest directory at or above `start_directory`
    holding a solution wins. If that directory holds several, the one with the
    shortest file name is picked and a warning is printed; this is a
    heuristic, nothing guarantees it is the right solution.
    """
    if explicit_path is not None:
        return SolutionDescriptor(util.absolute_path(explicit_path))

    start = util.absolute_path(start_directory)
    current = start
    while True:
        slns = _solutions_in(current)
        if len(slns) == 1:
            return SolutionDescriptor(slns[0])

        if len(slns) > 1:
            solution = SolutionDescriptor(
                min(slns, key=lambda path: len(path.name))
            )
            names = ", ".join(path.name for path in slns)
            print(
                f"Warning: more than one {SOLUTION_EXTENSION} found in "
                f"{current} ({names})! Using {solution.name}"
            )
            return solution

        if current.parent == current:
            raise SolutionNotFoundError(start)
        current = current.parent


__all__ = ["SolutionDescriptor", "SolutionNotFoundError", "locate_solution"]
