"""CLI command: figwind analyze -- report variables, media queries and colors."""

from __future__ import annotations

import click

from figwind.css.analysis import analyze_stylesheet, minify_css


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("--minify", is_flag=True, help="Print the minified stylesheet instead")
def analyze(cssfile, minify: bool) -> None:
    """Summarize custom properties, media queries, animations and colors."""
    source = cssfile.read()

    if minify:
        click.echo(minify_css(source))
        return

    analysis = analyze_stylesheet(source)

    click.echo(f"Variables ({len(analysis.variables)}):")
    for name, value in analysis.variables.items():
        click.echo(f"  --{name}: {value}")

    click.echo(f"Media queries ({len(analysis.media_queries)}):")
    for query in analysis.media_queries:
        click.echo(f"  {query}")

    click.echo(f"Animations ({len(analysis.animations)}):")
    for name in analysis.animations:
        click.echo(f"  {name}")

    click.echo(f"Colors ({len(analysis.color_palette)}):")
    for name, color in analysis.color_palette.items():
        click.echo(f"  {name}: {color}")
