"""Command line interface for suntimes."""

import sys
from datetime import datetime
from pathlib import Path

import click
from pydantic import ValidationError

from .config.settings import Settings
from .core.errors import SuntimesError
from .service import SuntimesService
from .utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log file path')
@click.pass_context
def cli(ctx, config, verbose, log_file):
    """Suntimes - Sunrise, sunset and twilight times for a location."""
    ctx.ensure_object(dict)

    try:
        settings = Settings.load_with_env(Path(config) if config else None)
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    ctx.obj['settings'] = settings

    setup_logging(settings.logging, verbose=verbose, log_file=Path(log_file) if log_file else None)

    if config:
        logger.info(f"Using configuration: {config}")
    if settings.offline.enabled:
        logger.info("Offline mode enabled, reading fixture files")


@cli.command()
@click.option('--city', type=str, default=None, help='City name to be used')
@click.option('--timezone', type=str, default=None, help='Timezone to be used, defaults to $TZ or UTC')
@click.option('--coordinates', type=str, default=None, help='Coordinates in lat,lon format')
@click.option('--date', 'on_date', type=click.DateTime(formats=['%Y-%m-%d']), default=None,
              help='Date to get times for in YYYY-MM-DD format, defaults to today')
@click.option('--detect-location', is_flag=True, help='Detect location by using IP address')
@click.pass_context
def report(ctx, city, timezone, coordinates, on_date, detect_location):
    """Show sun times for a location and date."""
    settings = ctx.obj['settings']
    on_date = (on_date or datetime.now()).date()

    try:
        service = SuntimesService(settings)
        text = service.report(
            on_date,
            detect_location=detect_location,
            city=city,
            timezone=timezone,
            coordinates=coordinates
        )
    except SuntimesError as e:
        logger.error(f"{e}")
        sys.exit(1)

    click.echo(text, nl=False)


@cli.command()
@click.option('--save', type=click.Path(dir_okay=False, path_type=Path), help='Write the configuration to a YAML file')
@click.pass_context
def config(ctx, save):
    """Show current configuration."""
    settings = ctx.obj['settings']

    click.echo("Current Configuration")
    click.echo("=" * 30)

    click.echo("\nAPI Settings:")
    click.echo(f"  IP Lookup URL: {settings.api.ip_lookup_url}")
    click.echo(f"  Times URL: {settings.api.times_url}")
    click.echo(f"  User-Agent: {settings.api.user_agent}")
    click.echo(f"  Timeout: {settings.api.timeout if settings.api.timeout is not None else 'none'}")

    click.echo("\nDefaults:")
    click.echo(f"  City: {settings.defaults.city}")
    click.echo(f"  Timezone: {settings.defaults.timezone}")
    click.echo(f"  Coordinates: {settings.defaults.coordinates}")

    click.echo("\nOffline Mode:")
    click.echo(f"  Enabled: {settings.offline.enabled}")
    for source, path in sorted(settings.offline.fixtures.items()):
        click.echo(f"  Fixture ({source}): {path}")

    click.echo("\nLogging Settings:")
    click.echo(f"  Level: {settings.logging.level}")
    click.echo(f"  Log File: {settings.logging.file_path}")

    if save:
        settings.save_to_file(save)
        click.echo(f"\nConfiguration saved to {save}")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
