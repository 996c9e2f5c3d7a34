"""
CLI commands for CSV fixture generation and splitting.

Thin wrappers over ``csv_fixtures.core.services``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from csv_fixtures.core.models.settings import Settings


def _settings(ctx: click.Context) -> Settings:
    """Load settings once per invocation and cache them on the context."""
    settings = ctx.obj.get("settings")
    if settings is None:
        from csv_fixtures.core.config.loader import ConfigError, load_settings

        try:
            settings = load_settings(ctx.obj.get("config_path"))
        except ConfigError as e:
            click.secho(f"❌ {e}", fg="red")
            sys.exit(1)
        ctx.obj["settings"] = settings
    return settings


@click.group()
def csv() -> None:
    """CSV fixtures — generate templated files, split uploads."""


@csv.command("generate")
@click.argument("count", type=int)
@click.option(
    "--rows-per-file", "-r",
    type=click.IntRange(min=1),
    default=None,
    help="Records per file (default: 1).",
)
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: from config).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    count: int,
    rows_per_file: int | None,
    output_dir: Path | None,
    as_json: bool,
) -> None:
    """Generate COUNT CSV files from the payment record template.

    Examples:

        csvfixtures csv generate 3

        csvfixtures csv generate 2 --rows-per-file 3
    """
    from csv_fixtures.core.errors import FixtureError
    from csv_fixtures.core.services.generator import generate_files

    settings = _settings(ctx)
    if count < 1 or count > settings.max_file_count:
        click.secho(f"❌ Count must be between 1 and {settings.max_file_count}!", fg="red")
        sys.exit(1)

    try:
        result = generate_files(count, rows_per_file, settings=settings, output_dir=output_dir)
    except FixtureError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho(f"✅ Generated {result.total_files_generated} file(s)", fg="green", bold=True)
    click.echo(f"   Directory: {result.output_directory}")
    click.echo(f"   Date:      {result.tomorrow_date}")
    click.echo(f"   Position 8: {result.starting_counter} → {result.ending_counter}")
    if result.mode == "multi_row":
        click.echo(f"   Rows:      {result.rows_per_file} per file ({result.total_rows} total)")

    if ctx.obj.get("verbose"):
        for path in result.generated_files:
            click.echo(f"     • {path}")


@csv.command("split")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: from config).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def split(ctx: click.Context, source: Path, output_dir: Path | None, as_json: bool) -> None:
    """Split SOURCE into one file per line."""
    from csv_fixtures.core.errors import FixtureError
    from csv_fixtures.core.services.splitter import split_file

    target = output_dir if output_dir is not None else _settings(ctx).split_path

    try:
        result = split_file(source, target)
    except FixtureError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho(f"✅ Split {result.original_file_name} into {result.total_lines_processed} file(s)", fg="green", bold=True)
    click.echo(f"   Directory: {result.output_directory}")
