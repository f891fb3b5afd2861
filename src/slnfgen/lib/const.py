from enum import StrEnum
from pathlib import Path

INCLUDE: str = "Include"
PROJECT: str = "Project"

SOLUTION_EXTENSION: str = ".sln"
SOLUTION_FILTER_EXTENSION: str = ".slnf"

DEFAULT_TRAVERSAL: str = "dirs.proj"

# Anything ending in .proj (dirs.proj, file copy projects, etc.) is an
# orchestration file and cannot be opened as a project in the IDE.
TRAVERSAL_MARKER: str = ".proj"

NO_IDE_TOKEN: str = "novs"
DEFAULT_IDE: str = "devenv"


class ItemType(StrEnum):

    PROJECT_REFERENCE = "ProjectReference"
    PROJECT_FILE = "ProjectFile"


class DirectoryProperty(StrEnum):

    THIS_FILE_DIRECTORY = "MSBuildThisFileDirectory"
    PROJECT_DIRECTORY = "MSBuildProjectDirectory"

    def to_token(self) -> str:
        return f"$({self.value})"

    def expand(self, directory: Path) -> str:
        # msbuild gives MSBuildThisFileDirectory a trailing slash, but not
        # MSBuildProjectDirectory
        match self:
            case self.THIS_FILE_DIRECTORY: return str(directory) + "\\"
            case self.PROJECT_DIRECTORY: return str(directory)
            case _: assert False


def is_traversal_path(path: str | Path) -> bool:
    return TRAVERSAL_MARKER in str(path)
