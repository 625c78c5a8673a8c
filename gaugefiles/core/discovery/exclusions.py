# gaugefiles/core/discovery/exclusions.py
import os
from typing import Iterable, Iterator, Optional, Set
import structlog

from gaugefiles.config.settings import (
    DEFAULT_EXCLUDED_DIR_NAMES, DiscoveryConfig, split_list_value,
)

log = structlog.get_logger(__name__)


class ExcludedDirectories:
    """
    Absolute directory paths that concept discovery must not descend into.

    Built once per discovery session from the fixed defaults under the
    project root plus the reports, logs and exclude-dirs overrides found in
    the environment. Entries can be added but never removed.
    """

    def __init__(self, project_root: str):
        self.project_root = project_root
        self._paths: Set[str] = set()

    @classmethod
    def for_project(cls, config: DiscoveryConfig) -> "ExcludedDirectories":
        excluded = cls(config.project_root_str)
        for name in DEFAULT_EXCLUDED_DIR_NAMES:
            excluded._paths.add(os.path.join(excluded.project_root, name))

        if config.reports_dir_override:
            excluded.add(config.reports_dir_override)
        if config.logs_dir_override:
            excluded.add(config.logs_dir_override)
        if config.exclude_dirs_override:
            excluded.add_many(split_list_value(config.exclude_dirs_override))

        log.debug("excluded_directories_built", project_root=excluded.project_root, count=len(excluded))
        return excluded

    def _resolve(self, value: str) -> Optional[str]:
        value = value.strip()
        if not os.path.isabs(value):
            value = os.path.join(self.project_root, value)
        try:
            return os.path.abspath(value)
        except (OSError, ValueError) as e:
            log.error("excluded_directory_resolution_failed", path=value, error=str(e))
            return None

    def add(self, value: str) -> None:
        resolved = self._resolve(value)
        if resolved is not None:
            self._paths.add(resolved)

    def add_many(self, values: Iterable[str]) -> None:
        for value in values:
            self.add(value)

    def __contains__(self, path: object) -> bool:
        return str(path) in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExcludedDirectories):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"ExcludedDirectories({sorted(self._paths)!r})"
