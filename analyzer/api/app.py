"""FastAPI application factory.

Routes
------
    /analyze   — fetch a page and return its SEO signals as JSON
    /*         — static front-end assets from ``settings.public_dir``
                 (``/`` serves ``index.html``)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from analyzer.api.routers import analyze as analyze_router
from analyzer.config import settings


def create_app(public_dir: Optional[Path] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Site Analyzer",
        description=(
            "Fetches a web page and reports its title, meta description, "
            "paragraph word count and HTTP status."
        ),
        version="0.1.0",
    )

    app.include_router(analyze_router.router, prefix="/analyze", tags=["analyze"])

    # Mounted last so /analyze is matched before the catch-all static mount.
    app.mount(
        "/",
        StaticFiles(directory=public_dir or settings.public_dir, html=True),
        name="static",
    )

    return app


# Module-level instance used by uvicorn:
#   uvicorn analyzer.api.app:app --reload
app = create_app()
