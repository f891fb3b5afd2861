import sys

from typing import Optional

from .get_args import get_args
from ..lib.graph import ProjectGraph
from ..lib.solution import SolutionNotFoundError, locate_solution


def main(argv: Optional[list[str]] = None) -> int:
    config = get_args(argv)

    try:
        solution = locate_solution(config.directory)
    except SolutionNotFoundError as e:
        print(e)
        return 1
    print(solution.path)

    if config.traversal is not None:
        graph = ProjectGraph(config.traversal)
        for node in graph.nodes():
            marker = ""
            if node.is_traversal:
                marker = " (traversal)"
            elif node in graph.dangling():
                marker = " (missing)"
            print("  " + str(node.path) + marker)

    return 0


if __name__ == "__main__":
    sys.exit(main())
