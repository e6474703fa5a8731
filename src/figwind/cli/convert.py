"""CLI command: figwind convert -- translate a CSS file into a component."""

from __future__ import annotations

import json
import sys

import click

from figwind.cli.options import (
    build_config,
    color_policy_option,
    spacing_policy_option,
    write_output,
)
from figwind.component import ComponentDescriptor
from figwind.errors import FigwindError
from figwind.pipeline import process_stylesheet, translate_stylesheet

_FORMATS = ["react", "html", "css", "classes", "blocks", "json"]


def _render(component: ComponentDescriptor, fmt: str) -> str:
    if fmt == "react":
        return component.react_code
    if fmt == "html":
        return component.markup_template
    if fmt == "css":
        return component.original_declarations_text
    if fmt == "classes":
        return component.utility_class_string
    return json.dumps(component.to_dict(), indent=2)


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(_FORMATS),
    default="react",
    show_default=True,
    help="What to print",
)
@click.option("--output", "-o", default=None, help="Write the result to a file")
@color_policy_option
@spacing_policy_option
def convert(
    cssfile,
    fmt: str,
    output: str | None,
    color_policy: str | None,
    spacing_policy: str | None,
) -> None:
    """Translate CSS copied from a design tool into a component.

    CSSFILE may be ``-`` to read from stdin.  The first rule block becomes the
    component; ``--format blocks`` lists the classes of every block instead.
    """
    config = build_config(color_policy, spacing_policy)
    source = cssfile.read()

    try:
        if fmt == "blocks":
            blocks = translate_stylesheet(source, config)
            content = "\n".join(
                f"{block.selector or '(no selector)'}: {' '.join(block.classes)}"
                for block in blocks
            )
        else:
            content = _render(process_stylesheet(source, config), fmt)
    except FigwindError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    write_output(content, output)
