from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..lib import util


@dataclass
class Config:
    directory: Path
    traversal: Optional[Path]


def get_args(argv: Optional[list[str]] = None) -> Config:

    parser = ArgumentParser(
        prog="find-solution",
        description="Find the VS solution a solution filter would use."
    )
    parser.add_argument(
        "-p", "--projects",
        dest="traversal",
        metavar="TRAVERSAL",
        help="also list the projects reachable from this traversal project"
    )
    parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        nargs="?",
        default=".",
        help="directory to start searching from"
    )

    args = parser.parse_args(argv)
    directory = util.normalize_windows_path(args.directory)
    traversal = args.traversal
    if traversal is not None:
        traversal = util.normalize_windows_path(traversal)

    return Config(directory, traversal)
