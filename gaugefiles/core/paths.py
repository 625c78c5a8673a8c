# gaugefiles/core/paths.py
"""
Path helpers shared by discovery and the tooling built on top of it.
"""
import os
from pathlib import Path
from typing import Hashable, Iterable, List, TypeVar, Union
import structlog

log = structlog.get_logger(__name__)

T = TypeVar("T", bound=Hashable)
PathLike = Union[str, Path]


def deduplicate(items: Iterable[T]) -> List[T]:
    # keeps the first occurrence of each value, preserving order.
    seen = set()
    unique: List[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def relative_to_project_root(path: PathLike, project_root: PathLike) -> str:
    # strips the "<project_root><sep>" prefix; other paths come back unchanged.
    path_str = str(path)
    prefix = str(project_root) + os.sep
    if path_str.startswith(prefix):
        return path_str[len(prefix):]
    return path_str


def resolve_data_file_path(path: PathLike, project_root: PathLike, data_dir: str = ".") -> Path:
    """
    Returns the location of a data file referenced from a spec.

    Absolute paths are returned as given. Relative ones are looked up in
    data_dir, which is expected to be relative to the project root; an
    absolute data_dir is logged as a warning and still placed under the
    project root.
    """
    if os.path.isabs(path):
        return Path(path)

    if data_dir != "." and os.path.isabs(data_dir):
        log.warning("data_dir_must_be_relative_to_project_root", data_dir=data_dir)

    path_to_file = Path(os.path.join(str(project_root), data_dir.lstrip(os.sep), str(path)))
    log.debug("reading_data_file", path=str(path_to_file))
    return path_to_file


def find_all_nested_dirs(directory: PathLike) -> List[Path]:
    # every directory below `directory` (not itself), at any depth, in walk order.
    nested_dirs: List[Path] = []

    def _on_walk_error(error: OSError):
        log.warning("nested_dir_walk_error", directory=str(directory), error=str(error))

    for root, dirs, _files in os.walk(str(directory), onerror=_on_walk_error):
        dirs.sort()
        # symlinked directories are not descended into, so they are not listed either.
        nested_dirs.extend(Path(root, d) for d in dirs if not os.path.islink(os.path.join(root, d)))
    return nested_dirs


def is_dir(path: PathLike) -> bool:
    try:
        return Path(path).is_dir()
    except (OSError, ValueError):
        return False
