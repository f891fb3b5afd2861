import subprocess
import sys
import traceback

from pathlib import Path
from typing import Optional

from .get_args import get_args, Config
from ..lib import util
from ..lib.const import SOLUTION_FILTER_EXTENSION
from ..lib.graph import GraphLoader, load_graph
from ..lib.solution import locate_solution
from ..lib.solution_filter import (
    build_solution_filter, check_solution_filter, write_solution_filter
)


def launch_ide(ide: str, slnf_path: Path) -> subprocess.Popen:
    print(f"{ide} {slnf_path}")
    return subprocess.Popen([ide, str(slnf_path)])


def generate(config: Config, loader: GraphLoader = load_graph) -> Path:
    traversal = util.absolute_path(config.traversal)
    slnf_path = traversal.with_suffix(SOLUTION_FILTER_EXTENSION)
    manifest_directory = slnf_path.parent

    solution = locate_solution(traversal.parent, config.solution)

    # Load the graph, dropping traversal nodes and making paths relative
    nodes = loader(traversal)
    solution_filter = build_solution_filter(
        nodes, solution, manifest_directory
    )
    check_solution_filter(solution_filter, solution, manifest_directory)

    return write_solution_filter(solution_filter, slnf_path)


def main(argv: Optional[list[str]] = None) -> int:

    config = get_args(argv)

    try:
        slnf_path = generate(config)
        if config.launch_ide:
            launch_ide(config.ide, slnf_path)
        else:
            print(f"Wrote {slnf_path}")
    except Exception:
        print(traceback.format_exc(), end="")
        return -1

    return 0


if __name__ == "__main__":
    sys.exit(main())
