from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..lib import util
from ..lib.const import (
    DEFAULT_IDE, DEFAULT_TRAVERSAL, NO_IDE_TOKEN, SOLUTION_EXTENSION
)


@dataclass
class Config:
    traversal: Path
    solution: Optional[Path]
    launch_ide: bool
    ide: str


def build_parser() -> ArgumentParser:

    parser = ArgumentParser(
        prog="slnfgen",
        description="Generate a solution filter from a traversal project."
    )
    parser.add_argument(
        "-s", "--solution",
        dest="solution",
        help=f"{SOLUTION_EXTENSION} to filter instead of the nearest one above"
    )
    parser.add_argument(
        "--no-ide",
        dest="launch_ide",
        action="store_false",
        help="only write the solution filter, do not open it"
    )
    parser.add_argument(
        "--ide",
        dest="ide",
        default=DEFAULT_IDE,
        help="command used to open the solution filter"
    )
    parser.add_argument(
        "traversal",
        metavar="TRAVERSAL",
        nargs="?",
        default=DEFAULT_TRAVERSAL,
        help="traversal project to start from"
    )
    parser.add_argument(
        "options",
        metavar=f"SOLUTION{SOLUTION_EXTENSION}|{NO_IDE_TOKEN}",
        nargs="*",
        help=(
            f"a {SOLUTION_EXTENSION} to filter, or '{NO_IDE_TOKEN}' to skip "
            "opening the solution filter"
        )
    )
    return parser


def get_args(argv: Optional[list[str]] = None) -> Config:

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    solution = args.solution
    launch_ide = args.launch_ide
    for option in args.options:
        if option == NO_IDE_TOKEN:
            launch_ide = False
        elif option.lower().endswith(SOLUTION_EXTENSION):
            if solution is not None:
                parser.error(f"more than one solution given: {option}")
            solution = option
        else:
            parser.error(f"unrecognized argument: {option}")

    traversal = util.normalize_windows_path(args.traversal)
    if solution is not None:
        solution = util.normalize_windows_path(solution)

    return Config(traversal, solution, launch_ide, args.ide)
