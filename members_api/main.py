"""
main.py — Members API application factory

Builds the FastAPI app: logging, request-ID and API-version middleware,
structured error handlers, the /health probe, and the members router
mounted under the configured API prefix.

Business Rules:
- Every response carries X-Request-ID and X-API-Version
- /api/v1/... is served by the same routes as /api/...
- All errors share the ErrorResponse envelope
- Malformed requests answer 400, unknown members 404

Called by: uvicorn (members_api.main:app), tests/conftest.py
Depends on: config, database, logging_config, routers/members, services/member_service
"""

import os
import time
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import APP_VERSION, settings
from .database import SessionLocal, engine
from .logging_config import setup_logging
from .models import Base
from .routers.members import build_members_router
from .schemas.errors import ErrorResponse
from .services.member_service import MemberNotFoundError, MemberService

API_VERSION = "v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Members API {} starting (production={})", APP_VERSION, settings.is_production)
    if os.environ.get("TESTING"):
        logger.info("TESTING mode, skipping table creation")
    else:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Tables ready")
    yield


def _error(request: Request, status_code: int, error: str, detail: list | None = None, headers=None):
    body = ErrorResponse(
        error=error,
        status_code=status_code,
        request_id=getattr(request.state, "request_id", ""),
        detail=detail,
    )
    return JSONResponse(body.model_dump(), status_code=status_code, headers=headers)


def create_app(member_service: MemberService | None = None) -> FastAPI:
    """Build the application around ``member_service`` (defaults to one bound to SessionLocal)."""
    setup_logging()
    if member_service is None:
        member_service = MemberService(SessionLocal)

    app = FastAPI(title="Members API", version=APP_VERSION, lifespan=lifespan)

    # ── Middleware ───────────────────────────────────────────────────
    # Registered inner-first: request_context wraps api_version_rewrite.

    @app.middleware("http")
    async def api_version_rewrite(request: Request, call_next):
        versioned = f"{settings.api_prefix}/{API_VERSION}"
        path = request.scope["path"]
        if path == versioned or path.startswith(versioned + "/"):
            request.scope["path"] = settings.api_prefix + path[len(versioned):]
        response = await call_next(request)
        response.headers["X-API-Version"] = API_VERSION
        return response

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "{} {} → {} ({:.1f} ms)",
                request.method, request.url.path, response.status_code, elapsed_ms,
            )
        response.headers["X-Request-ID"] = request_id
        return response

    # ── Error handlers ───────────────────────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        detail = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
            for e in exc.errors()
        ]
        logger.warning("Invalid request to {}: {}", request.url.path, detail)
        return _error(request, 400, "Invalid request", detail)

    @app.exception_handler(MemberNotFoundError)
    async def member_not_found_handler(request: Request, exc: MemberNotFoundError):
        return _error(request, 404, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    # ── Routes ───────────────────────────────────────────────────────

    @app.get("/health")
    def health():
        return {"status": "ok", "version": APP_VERSION}

    app.include_router(build_members_router(member_service), prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("members_api.main:app", host="0.0.0.0", port=8000)
