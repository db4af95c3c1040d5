"""
FastAPI application entry point for the API server.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.config import Settings, get_settings
from backend.routes import router
from backend.schemas import ErrorResponse

CORS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]

# Statuses Starlette raises when no route matches the request.
ROUTING_MISS_STATUSES = {404, 405}


def _requested_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def route_not_found(request: Request, exc: StarletteHTTPException):
    if exc.status_code not in ROUTING_MISS_STATUSES:
        return await http_exception_handler(request, exc)
    body = ErrorResponse(
        error="Route not found",
        message=f"The requested endpoint {_requested_url(request)} does not exist",
    )
    return JSONResponse(status_code=404, content=body.model_dump())


def _add_cors(app: FastAPI, settings: Settings) -> None:
    if settings.is_production:
        origins = {"allow_origins": [settings.client_url]}
    else:
        # Reflect whatever origin the browser sends.
        origins = {"allow_origin_regex": ".*"}
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
        **origins,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="MERN TypeScript API Server (FastAPI)",
        version="0.1.0",
        redirect_slashes=False,
    )
    _add_cors(app, settings)
    app.include_router(router, prefix=settings.api_prefix)
    app.add_exception_handler(StarletteHTTPException, route_not_found)
    return app


app = create_app()
