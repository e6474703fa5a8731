"""CLI command: figwind serve -- run the JSON API."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, debug: bool) -> None:
    """Start the figwind web API."""
    from figwind.cli.options import build_config
    from figwind.web.app import create_app

    config = build_config(None, None)
    host = host or config.host
    port = port or config.port

    app = create_app(config=config)
    click.echo(f"Starting figwind on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
