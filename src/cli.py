#!/usr/bin/env python3
"""Command Line Interface for Console Kit"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from core.button_descriptor import BUTTON_FORMATS
from core.config_manager import ConfigManager
from core.logging_setup import setup_logging
from utils.html_defuser import HtmlDefuser
from web.components.button_style import FORMAT_CSS, LOADING_CSS, NEUTRAL_CSS

console = Console()


@click.group()
@click.option("--config-dir", type=click.Path(file_okay=False), help="Directory containing settings.yaml")
@click.pass_context
def cli(ctx, config_dir):
    """Console Kit - CLI Interface"""
    config = ConfigManager(config_dir)
    setup_logging(config)
    ctx.obj = config


@cli.command()
@click.argument("sources", nargs=-1, type=click.File("r", encoding="utf-8"))
@click.option("--raw", is_flag=True, help="Print plain markup without highlighting")
def defuse(sources, raw):
    """Strip scripts and onXxx / javascript attributes from HTML files (or stdin)"""
    if not sources:
        sources = (click.get_text_stream("stdin"),)

    results = HtmlDefuser().defuse_many([source.read() for source in sources])

    for source, result in zip(sources, results):
        if raw:
            click.echo(result)
            continue
        if len(sources) > 1:
            console.rule(f"[bold cyan]{source.name}[/bold cyan]")
        console.print(Syntax(result, "html", word_wrap=True))


@cli.command()
def formats():
    """List button formats and the CSS classes they map to"""
    table = Table(title="Button Formats")
    table.add_column("Format", style="cyan")
    table.add_column("CSS class", style="green")

    table.add_row("[dim](none)[/dim]", NEUTRAL_CSS)
    for fmt in BUTTON_FORMATS:
        table.add_row(fmt, FORMAT_CSS[fmt])
    table.add_row("[dim](while loading)[/dim]", LOADING_CSS)

    console.print(table)


if __name__ == "__main__":
    cli()
