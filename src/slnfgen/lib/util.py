import ntpath
import os
from pathlib import Path


def normalize_windows_path(path: str | Path) -> Path:
    return Path(os.path.normpath(str(path).replace(ntpath.sep, "/")))


def normalize_windows_relpath(context: Path, path: str | Path) -> Path:
    denorm_path = context.joinpath(normalize_windows_path(path))
    return Path(os.path.normpath(denorm_path))


def absolute_path(path: str | Path) -> Path:
    return Path(os.path.abspath(normalize_windows_path(path)))


def is_slash(ch: str, pathmod=os.path) -> bool:
    return ch == pathmod.sep or (
        pathmod.altsep is not None and ch == pathmod.altsep
    )


def ends_with_slash(path: str, pathmod=os.path) -> bool:
    return len(path) > 0 and is_slash(path[-1], pathmod)


def ensure_trailing_slash(path: str, pathmod=os.path) -> str:
    if not ends_with_slash(path, pathmod):
        path += pathmod.sep
    return path


def make_relative(base_path: str | Path, path: str | Path, pathmod=os.path) -> str:
    """
    Return `path` relative to the directory `base_path`.

    `base_path` must be absolute; its last segment is always taken to be a
    directory. `path` may be absolute or relative to `base_path`. When no
    relative form exists (another drive, say) `path` is returned verbatim, and
    an empty `base_path` returns `path` as is. A target equal to the base
    yields ".".
    """
    base = str(base_path)
    target = str(path)
    if len(base) == 0:
        return target
    if not pathmod.isabs(base):
        raise ValueError(f"base path must be absolute: {base}")

    base = ensure_trailing_slash(base, pathmod)
    full = target if pathmod.isabs(target) else pathmod.join(base, target)
    full = pathmod.normpath(full)

    try:
        relative = pathmod.relpath(full, base)
    except ValueError:
        # different drive or mount
        return target

    if pathmod.altsep is not None:
        relative = relative.replace(pathmod.altsep, pathmod.sep)
    return relative
