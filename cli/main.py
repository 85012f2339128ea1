"""chatshare CLI — parse saved DeepSeek share pages.

Usage:
    python cli/main.py --help

Commands:
    parse   → print the extracted conversation as JSON
    render  → write the re-rendered conversation page to a file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from chatshare.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import httpx
import typer

from chatshare.config import settings
from chatshare.fetcher import fetch_share_page
from chatshare.parsers import parse_deepseek

app = typer.Typer(
    name="chatshare",
    help="Extract conversations from saved DeepSeek share pages.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_html(command: str, file: Optional[Path], url: Optional[str]) -> str:
    """Return the page HTML from exactly one of *file* or *url*."""
    if (file is None) == (url is None):
        typer.echo(f"[{command}] Pass exactly one of --file or --url.", err=True)
        raise typer.Exit(code=1)

    if file is not None:
        if not file.is_file():
            typer.echo(f"[{command}] File not found: {file}", err=True)
            raise typer.Exit(code=1)
        return file.read_text(encoding="utf-8")

    try:
        return fetch_share_page(url)
    except httpx.HTTPStatusError as exc:
        typer.echo(
            f"[{command}] HTTP {exc.response.status_code} fetching {url!r}",
            err=True,
        )
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        typer.echo(f"[{command}] Could not fetch {url!r}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("parse")
def parse(
    file: Optional[Path] = typer.Option(None, "--file", help="Saved share-page HTML file."),
    url: Optional[str] = typer.Option(None, "--url", help="Share-page URL to fetch."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Extract a share page and print the conversation as JSON."""
    _configure_logging(verbose)
    html = _load_html("parse", file, url)
    conversation = parse_deepseek(html)
    typer.echo(json.dumps(conversation.to_dict(), indent=2, ensure_ascii=False))


@app.command("render")
def render(
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the HTML page."),
    file: Optional[Path] = typer.Option(None, "--file", help="Saved share-page HTML file."),
    url: Optional[str] = typer.Option(None, "--url", help="Share-page URL to fetch."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Extract a share page and write it back out as a standalone HTML page."""
    _configure_logging(verbose)
    html = _load_html("render", file, url)
    conversation = parse_deepseek(html)
    output.write_text(conversation.content, encoding="utf-8")
    typer.echo(
        f"[render] Wrote {output}  ({conversation.source_html_bytes} source bytes, "
        f"scraped {conversation.scraped_at})"
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
