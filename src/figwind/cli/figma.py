"""CLI command: figwind figma -- fetch a Figma file and translate its components."""

from __future__ import annotations

import sys

import click

from figwind.cli.options import (
    build_config,
    color_policy_option,
    spacing_policy_option,
    write_output,
)
from figwind.component import render_design_tokens
from figwind.errors import FigwindError
from figwind.figma import (
    FigmaClient,
    convert_to_components,
    extract_design_tokens,
    parse_figma_url,
)


@click.command()
@click.argument("url")
@click.option(
    "--token",
    envvar="FIGMA_TOKEN",
    required=True,
    help="Figma personal access token (defaults to $FIGMA_TOKEN)",
)
@click.option("--tokens", "show_tokens", is_flag=True, help="Print a design token module")
@click.option("--output", "-o", default=None, help="Write the result to a file")
@color_policy_option
@spacing_policy_option
def figma(
    url: str,
    token: str,
    show_tokens: bool,
    output: str | None,
    color_policy: str | None,
    spacing_policy: str | None,
) -> None:
    """Fetch a Figma file and translate its components and frames.

    When URL selects a node (``node-id=``), only that subtree is translated.
    """
    config = build_config(color_policy, spacing_policy)

    try:
        ref = parse_figma_url(url)
        with FigmaClient(
            token, base_url=config.figma_api_base, timeout=config.request_timeout
        ) as client:
            figma_file = client.get_file(ref.file_key)
            document = figma_file.document
            if ref.node_id:
                nodes = client.get_file_nodes(ref.file_key, [ref.node_id])
                if ref.node_id not in nodes:
                    click.echo(f"Error: node {ref.node_id} not found", err=True)
                    sys.exit(1)
                document = nodes[ref.node_id]
    except FigwindError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if show_tokens:
        tokens = extract_design_tokens(document, figma_file.styles)
        write_output(render_design_tokens(tokens), output)
        return

    components = convert_to_components(
        document,
        color_policy=config.color_policy,
        spacing_policy=config.spacing_policy,
    )
    lines = [f"File: {figma_file.name}", f"Components: {len(components)}"]
    for component in components:
        lines.append(f"  {component.name} [{component.type}] {' '.join(component.classes)}")
    write_output("\n".join(lines), output)
