"""CLI entry point for the RSS renderer."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rss_renderer.config.logging import setup_logging
from rss_renderer.config.manager import ConfigManager
from rss_renderer.renderer import render
from rss_renderer.response import BufferedResponse
from rss_renderer.utils.errors import ConfigError, RendererError, UpstreamDataError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="rss-renderer",
    help="Render feed payloads into RSS 2.0 documents",
    no_args_is_help=True,
)
config_app = typer.Typer(name="config", help="Show or initialize configuration")
app.add_typer(config_app)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """RSS renderer - turn feed payloads into RSS 2.0 documents."""
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from rss_renderer import __version__

    console.print(f"[bold cyan]RSS Renderer[/bold cyan] v{__version__}")


def load_payload(path: Path) -> dict[str, Any]:
    """Read a render payload from a JSON or YAML file.

    Raises:
        UpstreamDataError: If the file cannot be parsed or is not a mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise UpstreamDataError(f"Could not read payload {path}: {e}") from e

    if not isinstance(data, dict):
        raise UpstreamDataError(f"Payload {path} must contain a mapping with feed and meta")
    return data


@app.command("render")
def render_feed(
    ctx: typer.Context,
    payload_file: Path = typer.Argument(
        ..., help="JSON or YAML file with feed, meta and attr", dir_okay=False
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write XML to this file instead of stdout"
    ),
    itunes: bool | None = typer.Option(
        None, "--itunes/--no-itunes", help="Include iTunes podcast tags"
    ),
    elevate_categories: bool | None = typer.Option(
        None,
        "--elevate-categories/--no-elevate-categories",
        help="Summarize item categories at channel level",
    ),
) -> None:
    """Render a payload file to RSS.

    Examples:
        rss-renderer render payload.json

        rss-renderer render payload.yaml --itunes -o feed.xml
    """
    try:
        config = ConfigManager().load_config()
        setup_logging(**(ctx.obj or {}), level=config.log_level)
        if itunes is not None:
            config.include_itunes_tags = itunes
        if elevate_categories is not None:
            config.elevate_categories = elevate_categories

        payload = load_payload(payload_file)
        response = BufferedResponse()
        render(payload, {"source": str(payload_file)}, response, config=config)

        if not response.ok:
            message = response.json().get("message", "unknown error")
            console.print(f"[red]✗[/red] Render failed: {escape(message)}")
            sys.exit(1)

        if output is None:
            print(response.body)
            return

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(response.body or "", encoding="utf-8")
        logger.debug(f"Wrote {output}")
        console.print(f"[green]✓[/green] Feed written to [bold]{output}[/bold]")

    except ConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)
    except RendererError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@config_app.command("show")
def show_config() -> None:
    """Show the active configuration."""
    try:
        manager = ConfigManager()
        config = manager.load_config()

        table = Table(title="[bold]Renderer Configuration[/bold]")
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        for key, value in config.model_dump().items():
            table.add_row(key, repr(value))

        console.print(table)
        console.print(f"\n[dim]File: {manager.config_file}[/dim]")

    except RendererError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@config_app.command("init")
def init_config(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration"
    ),
) -> None:
    """Write a default configuration file."""
    manager = ConfigManager()

    if manager.config_file.exists() and not force:
        console.print(
            f"[yellow]Configuration already exists:[/yellow] {manager.config_file}"
        )
        console.print("[dim]  Use --force to overwrite it[/dim]")
        return

    if manager.config_file.exists():
        manager.config_file.unlink()
    manager.load_config()
    console.print(f"[green]✓[/green] Configuration written to [bold]{manager.config_file}[/bold]")


if __name__ == "__main__":
    app()
