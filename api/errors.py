"""
messagely-api/api/errors.py
Gestionnaires d'erreurs : chaque erreur produit une réponse {"error": ...}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions import MessagelyError, UnauthorizedError

logger = logging.getLogger(__name__)


async def messagely_error_handler(request: Request, exc: MessagelyError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erreurs de validation Pydantic -> 400"""
    errors = exc.errors()
    if errors:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get("loc", ["unknown"]))
        detail = f"Field '{field}': {first_error.get('msg', 'Validation failed')}"
    else:
        detail = "Request validation failed"
    
    logger.warning(f"Validation error on {request.url.path}: {detail}")
    return JSONResponse(status_code=400, content={"error": detail})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erreurs inattendues : 500 sans détail interne"""
    logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MessagelyError, messagely_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
