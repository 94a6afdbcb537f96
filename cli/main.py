"""pagescraper CLI: scrape one page from the command line.

Usage:
    pagescraper scrape --url https://example.com
    pagescraper --log-level INFO scrape --url https://example.com --save --output page.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pagescraper.config import settings
from pagescraper.logging_config import setup_logging
from pagescraper.scraper import (
    FetchError,
    ParseError,
    PersistenceError,
    echo_report,
    render_json,
    save_report,
    scrape_page,
)

SAVE_PROMPT = "\nWould you like to save the scraped data to a file? (y/n)"

app = typer.Typer(
    name="pagescraper",
    help="Fetch a web page and list its links, paragraphs and images.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="DEBUG | INFO | WARNING | ERROR."
    ),
    log_format: str = typer.Option(
        settings.log_format, "--log-format", help="Log format: text | json."
    ),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level, log_format)


def _ask_to_save() -> bool:
    try:
        response = typer.prompt(SAVE_PROMPT, default="", show_default=False)
    except typer.Abort:
        # stdin closed (e.g. piped automation): treat as "no".
        typer.echo("")
        return False
    return response.strip().lower() == "y"


# ---------------------------------------------------------------------------
# Scrape command
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option("", help="URL to scrape (e.g., https://example.com)."),
    save: Optional[bool] = typer.Option(
        None,
        "--save/--no-save",
        help="Save without asking / never save. Prompts when omitted, except with --json.",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File to save the report to (default: settings.output_file)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of the numbered report."),
) -> None:
    """Scrape a URL and print its links, paragraph texts and image sources."""
    if not url:
        typer.echo("Please provide a URL using the --url option", err=True)
        raise typer.Exit(1)

    try:
        result = scrape_page(url)
    except (FetchError, ParseError) as exc:
        typer.echo(f"Failed to scrape: {exc}", err=True)
        raise typer.Exit(1)

    if as_json:
        # stdout carries the JSON document only: no prompt, status on stderr.
        typer.echo(render_json(result))
        save = bool(save)
    else:
        echo_report(result)
        if save is None:
            save = _ask_to_save()
    if not save:
        return

    filename = output or settings.output_file
    try:
        written = save_report(result, filename)
    except PersistenceError as exc:
        typer.echo(f"Error saving to file: {exc}", err=True)
        return
    typer.echo(f"Data saved to {written}", err=as_json)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
