"""Options and helpers shared by figwind subcommands."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from figwind.config import FigwindConfig
from figwind.translate import ColorPolicy, SpacingPolicy

color_policy_option = click.option(
    "--color-policy",
    type=click.Choice([p.value for p in ColorPolicy]),
    default=None,
    help="palette: fixed generic colors; arbitrary: keep literal colors",
)
spacing_policy_option = click.option(
    "--spacing-policy",
    type=click.Choice([p.value for p in SpacingPolicy]),
    default=None,
    help="bucket: snap to a fixed ladder; scale: px/4 scale with arbitrary fallback",
)


def build_config(color_policy: str | None, spacing_policy: str | None) -> FigwindConfig:
    """Environment config with command-line overrides applied."""
    try:
        config = FigwindConfig.from_env()
    except ValueError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    if color_policy:
        config = replace(config, color_policy=ColorPolicy(color_policy))
    if spacing_policy:
        config = replace(config, spacing_policy=SpacingPolicy(spacing_policy))
    return config


def write_output(content: str, output: str | None) -> None:
    """Write *content* to *output*, or to stdout when no path is given."""
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(content + "\n")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(content)
