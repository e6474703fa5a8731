"""figwind CLI entry point: Click group with subcommands."""

import logging

import click

from figwind import __version__


@click.group()
@click.version_option(version=__version__, prog_name="figwind")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """figwind - translate design-tool CSS into utility classes and components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from figwind.cli.convert import convert  # noqa: E402
from figwind.cli.analyze import analyze  # noqa: E402
from figwind.cli.figma import figma  # noqa: E402
from figwind.cli.serve import serve  # noqa: E402

cli.add_command(convert)
cli.add_command(analyze)
cli.add_command(figma)
cli.add_command(serve)
