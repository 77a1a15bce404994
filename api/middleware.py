"""
messagely-api/api/middleware.py
Middleware de délai maximal par requête
"""

import asyncio
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Méthodes sans effet de bord : abandonner la requête ne perd aucune écriture
SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """
    Interrompt une requête de lecture qui dépasse le délai configuré (504).

    Les routes synchrones tournent dans le threadpool et ne sont pas
    annulées par le 504 : une écriture (POST, ...) pourrait donc être
    validée après avoir répondu « timeout ». Seules les méthodes de
    SAFE_METHODS sont soumises au délai.
    """

    def __init__(self, app, timeout_seconds: float):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method not in SAFE_METHODS:
            return await call_next(request)
        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"⏱️ Request timed out after {self.timeout_seconds}s: {request.method} {request.url.path}")
            return JSONResponse(status_code=504, content={"error": "Request timed out"})
