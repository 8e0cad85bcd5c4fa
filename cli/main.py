"""SEO analyzer CLI — entry-point for backend operations.

Usage:
    python cli/main.py --help

Commands:
    analyze   → fetch one URL and print its SEO analysis as JSON
    serve     → run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from backend.analysis import analyze_url
from backend.errors import AnalysisError
from backend.logging_setup import configure as configure_logging

app = typer.Typer(
    name="seo-analyzer",
    help="Single-page SEO analyzer.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to LOG_LEVEL)."
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(level=log_level.upper() if log_level else None)


@app.command("analyze")
def analyze(
    url: str = typer.Argument(..., help="Absolute http(s) URL to analyze."),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output."),
) -> None:
    """Fetch URL and print its title, meta tags and keyword counts as JSON."""
    try:
        result = analyze_url(url)
    except AnalysisError as exc:
        typer.echo(f"[analyze] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result.to_dict(), indent=2 if pretty else None))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    typer.echo(f"[serve] Listening on http://{host}:{port}")
    uvicorn.run("backend.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
