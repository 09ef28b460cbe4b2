"""CLI interface for govfront.

Command-line tool for serving the browse pages.
"""

import logging
import sys
from pathlib import Path

import click

from govfront.config import Config


@click.group()
def cli() -> None:
    """govfront - browse pages for the content website."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover govfront.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--content-api",
    "content_api_endpoint",
    default=None,
    help="Content API endpoint URL (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log content API requests)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    content_api_endpoint: str | None,
    verbose: bool,
) -> None:
    """Start the browse server."""
    from govfront.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            content_api_endpoint=content_api_endpoint,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if not config.content_api.endpoint:
        click.echo(
            click.style(
                "Error: content API endpoint required (via --content-api or config)",
                fg="red",
            ),
            err=True,
        )
        click.echo("\nAdd the following to your govfront.toml:")
        click.echo("\n[content_api]")
        click.echo('endpoint = "https://contentapi.example.gov"')
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content API: {config.content_api.endpoint}")
    if config.detailed_guidance.endpoint:
        click.echo(f"Detailed guidance API: {config.detailed_guidance.endpoint}")
    else:
        click.echo("Detailed guidance: disabled (no endpoint in config)")
    click.echo(f"Website root: {config.website.root}")

    run_server(config)
