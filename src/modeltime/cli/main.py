"""CLI entry point for modeltime."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from modeltime.config.defaults import default_config
from modeltime.config.schema import ModeltimeConfig
from modeltime.core.modeltime import Modeltime
from modeltime.io.serialize import dump_schedule_csv, read_config_file
from modeltime.utils.exceptions import ConfigError, PeriodError

logger = logging.getLogger(__name__)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML or JSON config file. Uses defaults if not provided.",
)


def setup_logging(debug: bool = False) -> None:
    """Send log records to stderr at INFO, or DEBUG when requested."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(asctime)s | %(module)s | %(levelname)s | %(message)s",
        datefmt="%d-%b-%y %H:%M:%S",
        level=level,
    )
    logging.getLogger("modeltime").setLevel(level)


def _enable_debug(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        setup_logging(debug=True)


debug_option = click.option(
    "--debug",
    is_flag=True,
    default=False,
    expose_value=False,
    callback=_enable_debug,
    help="Enable debug logging.",
)


def _load(config_path: Path | None) -> Modeltime:
    if config_path is None:
        config: ModeltimeConfig = default_config()
    else:
        try:
            config = read_config_file(config_path)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e
    logger.debug("Using modeltime config: %s", config.model_dump())
    return Modeltime.from_config(config)


@click.group()
@click.version_option(package_name="modeltime")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def cli(debug: bool) -> None:
    """modeltime: period discretization for multi-era simulation calendars."""
    setup_logging(debug)


@cli.command()
@config_option
@debug_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to write the period schedule as CSV.",
)
def show(config_path: Path | None, output_path: Path | None) -> None:
    """Print the period schedule."""
    modeltime = _load(config_path)

    click.echo(
        f"Periods: {modeltime.get_max_period()} "
        f"({modeltime.get_start_year()} → {modeltime.get_end_year()})"
    )
    click.echo(f"{'Period':>6}  {'Year':>6}  {'Step':>4}")
    for period in range(modeltime.get_max_period()):
        click.echo(
            f"{period:>6}  {modeltime.get_period_to_year(period):>6}  "
            f"{modeltime.get_time_step(period):>4}"
        )

    click.echo(f"\nData periods: {modeltime.get_max_data_period()}")
    for data_period in range(modeltime.get_max_data_period()):
        click.echo(
            f"  {data_period}: model period "
            f"{modeltime.get_data_period_to_model_period(data_period)}, "
            f"offset {modeltime.get_data_offset(data_period)}"
        )

    if output_path is not None:
        output_path.write_text(dump_schedule_csv(modeltime))
        click.echo(f"\nSchedule written to {output_path}")


@cli.command()
@click.argument("year", type=int)
@config_option
@debug_option
def lookup(year: int, config_path: Path | None) -> None:
    """Print the period that represents YEAR."""
    modeltime = _load(config_path)
    result = modeltime.year_to_period(year)
    if not result:
        click.echo(f"Year {year} is outside the modeled span", err=True)
        raise click.exceptions.Exit(1)
    click.echo(f"Year {year} → period {result.period}")


@cli.command()
@click.argument("period", type=int)
@config_option
@debug_option
def describe(period: int, config_path: Path | None) -> None:
    """Print configuration and derived values for PERIOD."""
    modeltime = _load(config_path)
    try:
        record = modeltime.describe_period(period)
    except PeriodError as e:
        raise click.ClickException(str(e)) from e
    for key, val in record.items():
        click.echo(f"{key}: {val}")


if __name__ == "__main__":
    cli()
