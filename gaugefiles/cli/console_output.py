# gaugefiles/cli/console_output.py
"""
Prints discovery results and summaries for the CLI.
"""
from pathlib import Path
from typing import List

import click
import structlog
from rich.console import Console as RichConsole
from rich.table import Table

from gaugefiles.config.settings import DiscoveryConfig
from gaugefiles.core.paths import relative_to_project_root

log = structlog.get_logger(__name__)

def echo_paths(paths: List[Path], config: DiscoveryConfig, relative: bool = False):
    # one path per line on stdout.
    for path in paths:
        if relative and config.project_root is not None:
            click.echo(relative_to_project_root(path, config.project_root))
        else:
            click.echo(str(path))

def print_cli_summary_output(label: str, paths: List[Path], config: DiscoveryConfig):
    """
    Prints a small table on stderr: how many files were found and where
    they live relative to the project root.
    """
    log.debug("console_summary_output_requested", label=label, count=len(paths))
    console = RichConsole(stderr=True)

    per_dir = {}
    for path in paths:
        parent = relative_to_project_root(path.parent, config.project_root) if config.project_root is not None else str(path.parent)
        per_dir[parent] = per_dir.get(parent, 0) + 1

    table = Table(title=f"{label} ({len(paths)} found)")
    table.add_column("directory", style="cyan")
    table.add_column("files", justify="right")
    for directory in sorted(per_dir):
        table.add_row(directory, str(per_dir[directory]))
    console.print(table)
