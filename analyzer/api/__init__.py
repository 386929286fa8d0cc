"""HTTP layer: the ``/analyze`` endpoint and the bundled front-end.

``app`` is the ASGI application run by ``site-analyzer serve``; it can also be
started directly with ``uvicorn analyzer.api:app``.
"""

from analyzer.api.app import app

__all__ = ["app"]
