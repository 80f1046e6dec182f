"""Command line entry for the bootstrap."""

import logging

import click

from bootstrap import __version__
from bootstrap.main import run
from config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for the process."""
    level = logging.DEBUG if verbose else get_config().runtime.effective_log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="immich-bootstrap")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Install (on first use) and launch the Immich Google Photos Importer."""
    configure_logging(verbose)
    ctx.exit(run())
