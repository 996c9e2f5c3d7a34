"""
CSV Fixtures — CLI entrypoint.

Usage:
    python -m csv_fixtures.main --help
    python -m csv_fixtures.main csv generate 10
    python -m csv_fixtures.main csv generate 5 --rows-per-file 20
    python -m csv_fixtures.main csv split payments.csv
    python -m csv_fixtures.main web
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from csv_fixtures import __version__
from csv_fixtures.core.observability.logging_config import configure_from_flags


@click.group()
@click.version_option(version=__version__, prog_name="csvfixtures")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to csvfixtures.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """CSV Fixtures — bulk payment-file test data."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    configure_from_flags(debug=debug, verbose=verbose, quiet=quiet)


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show the effective settings."""
    from csv_fixtures.core.config.loader import ConfigError, find_config_file, load_settings

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        data = settings.model_dump(mode="json")
        data["output_path"] = str(settings.output_path)
        data["split_path"] = str(settings.split_path)
        click.echo(json.dumps(data, indent=2))
        return

    source = config_path or find_config_file()
    click.secho("⚙️  Settings", fg="cyan", bold=True)
    click.echo(f"   Config:      {source or '(defaults)'}")
    click.echo(f"   Output dir:  {settings.output_path}")
    click.echo(f"   Split dir:   {settings.split_path}")
    click.echo(f"   Counter:     starts at {settings.counter_base}")
    click.echo(f"   Max files:   {settings.max_file_count}")
    if settings.throttle_every:
        click.echo(
            f"   Throttle:    {settings.throttle_seconds}s every {settings.throttle_every} files"
        )
    else:
        click.echo("   Throttle:    off")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=8080, type=int, help="Port number.")
@click.pass_context
def web(ctx: click.Context, host: str, port: int) -> None:
    "Start the HTTP API server."
    from csv_fixtures.core.config.loader import ConfigError, find_config_file
    from csv_fixtures.ui.web.server import create_app, run_server

    config_path: Path | None = ctx.obj.get("config_path") or find_config_file()
    project_root = config_path.parent.resolve() if config_path else Path.cwd()

    try:
        app = create_app(project_root=project_root, config_path=config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.echo()
    click.secho("⚡ CSV Fixtures — HTTP API", bold=True)
    click.echo(f"   Endpoint: http://{host}:{port}/api/csv")
    click.echo(f"   Output:   {app.config['SETTINGS'].output_path}")
    click.echo()

    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


# ── Register sub-command groups from csv_fixtures/ui/cli/ ─────────

from csv_fixtures.ui.cli.csv import csv

cli.add_command(csv)


if __name__ == "__main__":
    cli()
