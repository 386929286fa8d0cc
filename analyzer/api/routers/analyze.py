"""Analysis endpoint.

Routes
------
GET /analyze?url=<target>    → analyze_url

Failures to fetch or parse the target are reported in the body with a 200
status; only a missing ``url`` parameter is a client error.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from analyzer.analysis import analyze_url, error_payload

router = APIRouter()


@router.get("")
def analyze(url: Optional[str] = None) -> Any:
    """Fetch *url* and return its SEO signals, or an ``error`` object."""
    if not url:
        return JSONResponse(status_code=400, content=error_payload("Missing url parameter."))
    return analyze_url(url)
