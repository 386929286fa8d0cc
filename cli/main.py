"""Site Analyzer CLI — entry-point for serving and one-off analysis.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP server (API + static front-end)
    analyze   → analyse a single URL and print the JSON result
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from analyzer.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from analyzer.config import settings

app = typer.Typer(
    name="site-analyzer",
    help="Website analyzer CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to LOG_LEVEL or INFO)."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (defaults to HOST)."),
    port: Optional[int] = typer.Option(None, help="Port to listen on (defaults to PORT)."),
    reload: bool = typer.Option(False, help="Reload on source changes (development)."),
) -> None:
    """Run the website analyzer HTTP server."""
    import uvicorn

    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port
    typer.echo(f"[serve] Website analyzer server is running on http://{bind_host}:{bind_port}")
    uvicorn.run(
        "analyzer.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("analyze")
def analyze(
    url: str = typer.Option(..., help="URL to analyse."),
) -> None:
    """Fetch a URL and print its SEO signals as JSON."""
    from analyzer.analysis import analyze_url

    result = analyze_url(url)
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    if "error" in result:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
