# gaugefiles/cli/interface.py
import sys
from pathlib import Path
from typing import Any, Callable, List, NoReturn, Tuple

import click
from click_option_group import optgroup
import structlog

from gaugefiles import __version__ as app_version
from gaugefiles.config.loader import load_discovery_config, resolve_project_root
from gaugefiles.config.settings import DEFAULT_SPECS_DIR, DiscoveryConfig
from gaugefiles.cli.console_output import echo_paths, print_cli_summary_output
from gaugefiles.core.discovery import (
    ProjectFileDiscoverer,
    deduplicate,
    find_all_nested_dirs,
    gauge_file_extensions,
    resolve_data_file_path,
)
from gaugefiles.exceptions import GaugeFilesError
from gaugefiles.logging_setup import configure_logging

log = structlog.get_logger(__name__)


def _fail(e: Exception) -> NoReturn:
    log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)


def _run_discovery(ctx: click.Context, label: str, find: Callable[[DiscoveryConfig], List[Path]]):
    config: DiscoveryConfig = ctx.obj["config"]
    try:
        found = find(config)
    except GaugeFilesError as e:
        _fail(e)
    log.info("discovery_command_complete", command=label, count=len(found))
    echo_paths(found, config, relative=ctx.obj["relative"])
    if ctx.obj["summary"]:
        print_cli_summary_output(label, found, config)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@optgroup.group("Project Options", help="Where the Gauge project lives.")
@optgroup.option("--project-root", "project_root", type=click.Path(file_okay=False, path_type=Path), default=None, help="Project root. Default: $GAUGE_PROJECT_ROOT, else the current directory.")
@optgroup.group("Output Options", help="How discovered paths are printed.")
@optgroup.option("--relative", "relative", is_flag=True, default=False, help="Print paths relative to the project root.")
@optgroup.option("--summary", "summary", is_flag=True, default=False, help="Print a per-directory summary table on stderr.")
@optgroup.group("Application Behavior", help="Logging.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs_cli", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="gaugefiles", prog_name="gaugefiles", help="Show version and exit.")
@click.pass_context
def main_cli_group(ctx: click.Context, **cli_params: Any):
    """gaugefiles: find the spec and concept files of a Gauge project."""

    log_level = "warning"
    if cli_params.get("verbosity_level", 0) == 1: log_level = "info"
    elif cli_params.get("verbosity_level", 0) >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, force_json_logs=cli_params.get("force_json_logs_cli", False))

    log.debug("cli_command_invoked", params=cli_params)

    project_root = resolve_project_root(cli_params.get("project_root")) or Path.cwd()
    try:
        config = load_discovery_config(project_root)
    except GaugeFilesError as e:
        _fail(e)

    ctx.obj = {
        "config": config,
        "relative": cli_params.get("relative", False),
        "summary": cli_params.get("summary", False),
    }


@main_cli_group.command("specs")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def specs_command(ctx: click.Context, paths: Tuple[Path, ...]):
    """List spec files under PATHS (default: <project root>/specs)."""
    def find(config: DiscoveryConfig) -> List[Path]:
        search_paths = list(paths) or [config.project_root / DEFAULT_SPECS_DIR]
        return ProjectFileDiscoverer(config).get_spec_files(search_paths)

    _run_discovery(ctx, "specs", find)


@main_cli_group.command("concepts")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def concepts_command(ctx: click.Context, paths: Tuple[Path, ...]):
    """List concept files under PATHS, or across the whole project when none are given."""
    def find(config: DiscoveryConfig) -> List[Path]:
        discoverer = ProjectFileDiscoverer(config)
        if paths:
            return deduplicate(discoverer.find_concept_files(list(paths)))
        return discoverer.get_concept_files()

    _run_discovery(ctx, "concepts", find)


@main_cli_group.command("nested-dirs")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.pass_context
def nested_dirs_command(ctx: click.Context, directory: Path):
    """List every directory below DIRECTORY."""
    _run_discovery(ctx, "nested directories", lambda config: find_all_nested_dirs(directory))


@main_cli_group.command("extensions")
@click.pass_context
def extensions_command(ctx: click.Context):
    """Show the file extensions recognized as spec or concept files."""
    config: DiscoveryConfig = ctx.obj["config"]
    for ext in gauge_file_extensions(config.spec_extensions):
        click.echo(ext)


@main_cli_group.command("data-path")
@click.argument("path")
@click.pass_context
def data_path_command(ctx: click.Context, path: str):
    """Show where a data file referenced from a spec is read from."""
    config: DiscoveryConfig = ctx.obj["config"]
    click.echo(str(resolve_data_file_path(path, config.project_root, config.data_dir)))
