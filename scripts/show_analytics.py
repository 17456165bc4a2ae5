#!/usr/bin/env python3
"""
Command-line interface for resume match analytics.

Loads a resume profile and its job score records from the data directory,
derives the dashboard analytics and either prints them as a text report or
exports them as JSON.

Commands:
    report - Print the analytics dashboard for a resume
    export - Write the analytics dashboard for a resume as JSON
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from matchboard.contexts.analytics import build_dashboard, load_analytics_config
from matchboard.contexts.analytics.logger import setup_analytics_logger
from matchboard.contexts.intake import IntakeError, load_snapshot
from matchboard.contexts.reporting import export_dashboard_json, render_dashboard_report
from matchboard.utils.timestamp import now

load_dotenv()
DATA_PATH = Path(os.getenv("MATCHBOARD_DATA_PATH", "data"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Resume match analytics: statistics, skill gaps and recommendations",
    invoke_without_command=True,
)

DataDirOption = Annotated[
    Path,
    typer.Option("--data-dir", "-d", help="Directory holding resumes/ and scores/ payloads"),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="YAML file overriding analytics thresholds (defaults to MATCHBOARD_CONFIG_PATH)",
        exists=True,
        dir_okay=False,
    ),
]
LogDirOption = Annotated[
    Optional[Path],
    typer.Option("--log-dir", help="Directory for the session log (defaults under LOGS_PATH)"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _build_view(resume_id: str, data_dir: Path, config: Optional[Path], log_dir: Optional[Path]):
    """Load the snapshot and build the dashboard, exiting with code 1 on failure."""
    setup_analytics_logger(log_dir or LOGS_PATH / f"analytics_{now()}", resume_id)

    try:
        analytics_config = load_analytics_config(config)
    except (OmegaConfBaseException, OSError, ValueError) as e:
        typer.secho(f"✗ Invalid analytics config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        snapshot = load_snapshot(resume_id, data_dir)
    except IntakeError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    return build_dashboard(snapshot, analytics_config)


@app.command("report")
def report_command(
    resume_id: Annotated[str, typer.Argument(help="Resume identifier")],
    data_dir: DataDirOption = DATA_PATH,
    config: ConfigOption = None,
    log_dir: LogDirOption = None,
):
    """
    Print the analytics dashboard for a resume.

    Examples:\n

        $ show_analytics.py report 42                        # Uses MATCHBOARD_DATA_PATH

        $ show_analytics.py report 42 --data-dir fixtures    # Explicit data directory
    """
    view = _build_view(resume_id, data_dir, config, log_dir)
    typer.echo(render_dashboard_report(view))


@app.command("export")
def export_command(
    resume_id: Annotated[str, typer.Argument(help="Resume identifier")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="JSON file to write", dir_okay=False),
    ] = None,
    data_dir: DataDirOption = DATA_PATH,
    config: ConfigOption = None,
    log_dir: LogDirOption = None,
):
    """
    Write the analytics dashboard for a resume as JSON.

    Examples:\n

        $ show_analytics.py export 42                          # Writes outs/analytics/42.json

        $ show_analytics.py export 42 -o dashboard.json        # Custom output path
    """
    view = _build_view(resume_id, data_dir, config, log_dir)
    output_path = output or Path("outs") / "analytics" / f"{resume_id}.json"
    export_dashboard_json(view, output_path)
    typer.secho(f"✓ Wrote {output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
