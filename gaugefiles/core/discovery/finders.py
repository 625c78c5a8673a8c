# gaugefiles/core/discovery/finders.py
import os
from pathlib import Path
from typing import List, Protocol, Sequence, Union
import structlog

from gaugefiles.config.settings import DiscoveryConfig
from gaugefiles.core.discovery.classifier import is_valid_concept_extension, is_valid_spec_extension
from gaugefiles.core.discovery.exclusions import ExcludedDirectories
from gaugefiles.core.discovery.walker import find_files
from gaugefiles.core.paths import deduplicate
from gaugefiles.exceptions import ConfigError, PathResolutionError, UserInputError

log = structlog.get_logger(__name__)

PathLike = Union[str, Path]


class FileDiscoverer(Protocol):
    # what the parsing and refactoring layers need from discovery.
    def find_spec_files_in(self, directory: PathLike) -> List[Path]: ...
    def get_spec_files(self, paths: Sequence[PathLike]) -> List[Path]: ...
    def find_concept_files_in(self, directory: PathLike) -> List[Path]: ...
    def find_concept_files(self, paths: Sequence[PathLike]) -> List[Path]: ...
    def get_concept_files(self) -> List[Path]: ...


class ProjectFileDiscoverer:
    """Finds spec and concept files on disk for one project configuration."""

    def __init__(self, config: DiscoveryConfig):
        self.config = config
        self.log = structlog.get_logger(f"{__name__}.{self.__class__.__name__}")

    def is_spec_file(self, path: PathLike) -> bool:
        return is_valid_spec_extension(path, self.config.spec_extensions)

    def find_spec_files_in(self, directory: PathLike) -> List[Path]:
        # spec discovery walks everything; the excluded directories apply to concepts only.
        return find_files(directory, self.is_spec_file)

    def get_spec_files(self, paths: Sequence[PathLike]) -> List[Path]:
        """
        Returns the spec files at the given paths, in order.

        Directories are searched recursively and must contain at least one
        spec; files are taken as-is when they carry a spec extension and
        ignored otherwise. Overlapping paths are not deduplicated.
        """
        spec_files: List[Path] = []
        for path in paths:
            if not os.path.exists(path):
                raise UserInputError(f"Specs directory {path} does not exist.")
            if os.path.isdir(path):
                found = self.find_spec_files_in(path)
                if not found:
                    raise UserInputError(f"No specifications found in {path}.")
                spec_files.extend(found)
            elif self.is_spec_file(path):
                spec_files.append(Path(os.path.abspath(path)))
            else:
                self.log.debug("non_spec_file_ignored", path=str(path))
        self.log.info("spec_files_collected", input_count=len(paths), count=len(spec_files))
        return spec_files

    def find_concept_files_in(self, directory: PathLike) -> List[Path]:
        excluded = ExcludedDirectories.for_project(self.config)

        def should_skip(path: Path, is_dir: bool) -> bool:
            if not is_dir:
                return False
            return path.name.startswith(".") or path in excluded

        return find_files(directory, is_valid_concept_extension, should_skip)

    def _absolute_concept_path(self, path: PathLike) -> str:
        concept_path = str(path).strip()
        if not os.path.isabs(concept_path):
            concept_path = os.path.join(self.config.project_root_str, concept_path)
        try:
            return os.path.abspath(concept_path)
        except (OSError, ValueError) as e:
            raise PathResolutionError(f"Error getting absolute concept path. {e}")

    def find_concept_files(self, paths: Sequence[PathLike]) -> List[Path]:
        concept_files: List[Path] = []
        for path in paths:
            abs_path = self._absolute_concept_path(path)
            if not os.path.exists(abs_path):
                raise UserInputError(f"No such file or directory: {abs_path}")
            concept_files.extend(self.find_concept_files_in(abs_path))
        return concept_files

    def get_concept_files(self) -> List[Path]:
        """
        Returns the project's concept files without duplicates.

        Configured concept paths take precedence. Without them the whole
        project root is searched, plus every directory listed in
        gauge_specs_dir.
        """
        if self.config.concepts_paths:
            self.log.debug("searching_configured_concept_paths", paths=self.config.concepts_paths)
            return deduplicate(self.find_concept_files(self.config.concepts_paths))

        if self.config.project_root is None:
            raise ConfigError("Failed to get project root.")

        files = self.find_concept_files([self.config.project_root_str])
        specs_dirs = self.config.specs_dirs
        if specs_dirs:
            files.extend(self.find_concept_files(specs_dirs))
        concept_files = deduplicate(files)
        self.log.info("concept_files_collected", count=len(concept_files))
        return concept_files


def find_spec_files_in(directory: PathLike, config: DiscoveryConfig) -> List[Path]:
    return ProjectFileDiscoverer(config).find_spec_files_in(directory)

def get_spec_files(paths: Sequence[PathLike], config: DiscoveryConfig) -> List[Path]:
    return ProjectFileDiscoverer(config).get_spec_files(paths)

def find_concept_files_in(directory: PathLike, config: DiscoveryConfig) -> List[Path]:
    return ProjectFileDiscoverer(config).find_concept_files_in(directory)

def find_concept_files(paths: Sequence[PathLike], config: DiscoveryConfig) -> List[Path]:
    return ProjectFileDiscoverer(config).find_concept_files(paths)

def get_concept_files(config: DiscoveryConfig) -> List[Path]:
    return ProjectFileDiscoverer(config).get_concept_files()
