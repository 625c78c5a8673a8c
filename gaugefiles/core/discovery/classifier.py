# gaugefiles/core/discovery/classifier.py
"""
Classifies paths as spec files, concept files or neither, by extension.
"""
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from gaugefiles.config.settings import CONCEPT_FILE_EXTENSION

PathLike = Union[str, Path]

def _extension_of(path: PathLike) -> str:
    return os.path.splitext(str(path))[1].lower()

def normalize_extensions(values: Iterable[str]) -> List[str]:
    # lowercases, adds the leading dot and drops blanks and repeats, keeping order.
    normalized: List[str] = []
    for value in values:
        ext = value.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in normalized:
            normalized.append(ext)
    return normalized

def is_valid_spec_extension(path: PathLike, spec_extensions: Sequence[str]) -> bool:
    # checks if the path has one of the configured spec file extensions.
    ext = _extension_of(path)
    return bool(ext) and ext in spec_extensions

def is_valid_concept_extension(path: PathLike) -> bool:
    # checks if the path has the concept file extension.
    return _extension_of(path) == CONCEPT_FILE_EXTENSION

def is_spec(path: PathLike, spec_extensions: Sequence[str]) -> bool:
    return is_valid_spec_extension(path, spec_extensions)

def is_concept(path: PathLike) -> bool:
    return is_valid_concept_extension(path)

def is_gauge_file(path: PathLike, spec_extensions: Sequence[str]) -> bool:
    # true for spec files and concept files alike.
    return is_concept(path) or is_spec(path, spec_extensions)

def gauge_file_extensions(spec_extensions: Sequence[str]) -> List[str]:
    return list(spec_extensions) + [CONCEPT_FILE_EXTENSION]
