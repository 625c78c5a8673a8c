"""
Spec and concept file discovery for gaugefiles.

This package decides which files on disk belong to a Gauge project: it
classifies paths by extension, builds the set of directories concept
discovery skips, and walks input paths to collect spec and concept files.
"""
from .classifier import (
    gauge_file_extensions,
    is_concept,
    is_gauge_file,
    is_spec,
    is_valid_concept_extension,
    is_valid_spec_extension,
)
from .exclusions import ExcludedDirectories
from .finders import (
    FileDiscoverer,
    ProjectFileDiscoverer,
    find_concept_files,
    find_concept_files_in,
    find_spec_files_in,
    get_concept_files,
    get_spec_files,
)
from gaugefiles.core.paths import (
    deduplicate,
    find_all_nested_dirs,
    is_dir,
    relative_to_project_root,
    resolve_data_file_path,
)

__all__ = [
    "ExcludedDirectories",
    "FileDiscoverer",
    "ProjectFileDiscoverer",
    "deduplicate",
    "find_all_nested_dirs",
    "find_concept_files",
    "find_concept_files_in",
    "find_spec_files_in",
    "gauge_file_extensions",
    "get_concept_files",
    "get_spec_files",
    "is_concept",
    "is_dir",
    "is_gauge_file",
    "is_spec",
    "is_valid_concept_extension",
    "is_valid_spec_extension",
    "relative_to_project_root",
    "resolve_data_file_path",
]
