# gaugefiles/config/loader.py
"""
Builds a DiscoveryConfig from project TOML files and environment variables.
"""
import os
import toml
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
import structlog

from gaugefiles.core.discovery.classifier import normalize_extensions
from gaugefiles.exceptions import ConfigError

from .settings import (
    CONCEPTS_DIR_ENV, DATA_DIR_ENV, DEFAULT_DATA_DIR, DEFAULT_SPEC_EXTENSIONS,
    PROJECT_ROOT_ENV, SPEC_FILE_EXTENSIONS_ENV, DiscoveryConfig, split_list_value,
)

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".gaugefiles.toml", "gaugefiles.toml", "pyproject.toml"]

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Could not parse config file {file_path}: {e}")
    return data.get("tool", {}).get("gaugefiles", {}) if file_path.name == "pyproject.toml" else data

def load_project_settings(project_root: Path) -> Dict[str, Any]:
    # returns settings from the first project-local config file found.
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = project_root / filename
        if candidate.is_file():
            settings = _load_toml_file_data(candidate)
            if settings:
                log.info("loading_project_local_config", path=str(candidate))
                return settings
    log.debug("no_configuration_files_loaded", project_root=str(project_root))
    return {}

def _as_list(value: Union[str, List[str], None]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return split_list_value(value)
    return [str(v).strip() for v in value if str(v).strip()]

def resolve_project_root(
    project_root: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    # explicit argument wins over GAUGE_PROJECT_ROOT; no fallback to the cwd here.
    environ = os.environ if environ is None else environ
    candidate = project_root or environ.get(PROJECT_ROOT_ENV, "")
    if not candidate:
        return None
    return Path(os.path.abspath(candidate))

def load_discovery_config(
    project_root: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DiscoveryConfig:
    """
    Layers defaults, the project's TOML settings and environment variables
    (in that order of increasing precedence) into a DiscoveryConfig.
    """
    environ = os.environ if environ is None else environ
    root = resolve_project_root(project_root, environ)

    file_settings: Dict[str, Any] = load_project_settings(root) if root is not None else {}

    spec_extensions = normalize_extensions(_as_list(file_settings.get("spec_file_extensions"))) or list(DEFAULT_SPEC_EXTENSIONS)
    concepts_paths = _as_list(file_settings.get("concepts_dir"))
    data_dir = str(file_settings.get("data_dir") or DEFAULT_DATA_DIR)

    env_extensions = normalize_extensions(split_list_value(environ.get(SPEC_FILE_EXTENSIONS_ENV, "")))
    if env_extensions:
        spec_extensions = env_extensions
    env_concepts = split_list_value(environ.get(CONCEPTS_DIR_ENV, ""))
    if env_concepts:
        concepts_paths = env_concepts
    if environ.get(DATA_DIR_ENV):
        data_dir = environ[DATA_DIR_ENV]

    config = DiscoveryConfig(
        project_root=root,
        spec_extensions=tuple(spec_extensions),
        concepts_paths=concepts_paths,
        data_dir=data_dir,
        environ=environ,
    )
    log.debug(
        "discovery_config_loaded",
        project_root=config.project_root_str,
        spec_extensions=list(config.spec_extensions),
        concepts_paths=config.concepts_paths,
        data_dir=config.data_dir,
    )
    return config
