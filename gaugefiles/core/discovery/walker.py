# gaugefiles/core/discovery/walker.py
import os
from pathlib import Path
from typing import Callable, List, Union
import structlog

log = structlog.get_logger(__name__)

ValidFilePredicate = Callable[[Path], bool]
SkipPredicate = Callable[[Path, bool], bool]


def never_skip(path: Path, is_dir: bool) -> bool:
    return False


def find_files(
    root_dir: Union[str, Path],
    is_valid: ValidFilePredicate,
    should_skip: SkipPredicate = never_skip,
) -> List[Path]:
    """
    Walks root_dir and returns the files accepted by is_valid.

    should_skip is asked about every entry, root_dir included: a skipped
    directory is pruned together with its subtree, a skipped file is left
    out. Names are sorted at each level, so an unchanged tree always yields
    the same order.
    """
    abs_root = Path(os.path.abspath(root_dir))
    log.debug("find_files_started", root=str(abs_root))

    if abs_root.is_file():
        if not should_skip(abs_root, False) and is_valid(abs_root):
            return [abs_root]
        return []

    # the root itself goes through should_skip like any other directory.
    if should_skip(abs_root, True):
        log.debug("find_files_root_skipped", root=str(abs_root))
        return []

    found: List[Path] = []
    for root, dirs, files in os.walk(str(abs_root), topdown=True, followlinks=False):
        # prune directories.
        dirs[:] = sorted(d for d in dirs if not should_skip(Path(root, d), True))

        for file_name in sorted(files):
            file_path = Path(root, file_name)
            if should_skip(file_path, False):
                continue
            if is_valid(file_path):
                found.append(file_path)

    log.debug("find_files_finished", root=str(abs_root), count=len(found))
    return found
