import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple
import structlog

log = structlog.get_logger(__name__)

# environment keys consulted during discovery.
PROJECT_ROOT_ENV = "GAUGE_PROJECT_ROOT"
REPORTS_DIR_ENV = "gauge_reports_dir"
LOGS_DIR_ENV = "logs_directory"
EXCLUDE_DIRS_ENV = "gauge_exclude_dirs"
SPECS_DIR_ENV = "gauge_specs_dir"
CONCEPTS_DIR_ENV = "gauge_concepts_dir"
SPEC_FILE_EXTENSIONS_ENV = "gauge_spec_file_extensions"
DATA_DIR_ENV = "gauge_data_dir"

CONCEPT_FILE_EXTENSION = ".cpt"
DEFAULT_SPEC_EXTENSIONS: Tuple[str, ...] = (".spec", ".md")
DEFAULT_DATA_DIR = "."
DEFAULT_SPECS_DIR = "specs"

# directories under the project root that concept discovery never enters.
BUILD_OUTPUT_DIR_NAME = "gauge_bin"
REPORTS_DIR_NAME = "reports"
LOGS_DIR_NAME = "logs"
ENV_DIR_NAME = "env"
DEFAULT_EXCLUDED_DIR_NAMES: Tuple[str, ...] = (
    BUILD_OUTPUT_DIR_NAME, REPORTS_DIR_NAME, LOGS_DIR_NAME, ENV_DIR_NAME,
)


def split_list_value(value: Optional[str]) -> List[str]:
    # splits a comma-separated setting, dropping blank entries.
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class DiscoveryConfig:
    # holds the settings for one discovery session.
    project_root: Optional[Path] = None
    spec_extensions: Tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS
    concepts_paths: List[str] = field(default_factory=list)
    data_dir: str = DEFAULT_DATA_DIR
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ, repr=False)

    def __post_init__(self):
        if self.project_root is not None:
            self.project_root = Path(os.path.abspath(self.project_root))

    @property
    def project_root_str(self) -> str:
        return str(self.project_root) if self.project_root is not None else ""

    def env_value(self, name: str) -> str:
        # environment overrides are read at call time so each session sees the current values.
        return self.environ.get(name, "") or ""

    @property
    def reports_dir_override(self) -> str:
        return self.env_value(REPORTS_DIR_ENV)

    @property
    def logs_dir_override(self) -> str:
        return self.env_value(LOGS_DIR_ENV)

    @property
    def exclude_dirs_override(self) -> str:
        return self.env_value(EXCLUDE_DIRS_ENV)

    @property
    def specs_dirs(self) -> List[str]:
        return split_list_value(self.env_value(SPECS_DIR_ENV))
