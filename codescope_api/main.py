"""
FastAPI application for Codescope.
"""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from codescope import Language, SnippetAnalyzer

from . import __version__
from .config import settings, logger
from .models import AnalyzeRequest, AnalyzeResponse, ErrorResponse


snippet_analyzer = SnippetAnalyzer()

# In-process request counters
_telemetry: dict[str, Any] = {
    "requests_total": 0,
    "requests_failed": 0,
    "rejected_empty": 0,
    "languages": {lang.value: 0 for lang in Language},
}


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


async def request_size_middleware(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH"):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.MAX_REQUEST_SIZE:
            return JSONResponse(
                status_code=413,
                content={
                    "success": False,
                    "error": "Request too large",
                    "details": f"Request body exceeds {settings.MAX_REQUEST_SIZE} bytes",
                },
            )
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------


analysis_router = APIRouter()


@analysis_router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze_code(request: AnalyzeRequest):
    """
    Analyze a code snippet.

    Detects the language, runs heuristic lint rules and estimates the
    time complexity. Declared sync so the CPU-bound engine runs in the
    threadpool instead of on the event loop.
    """
    if not request.code:
        _telemetry["rejected_empty"] += 1
        raise HTTPException(status_code=400, detail="No code provided")

    _telemetry["requests_total"] += 1
    start_time = time.perf_counter()

    try:
        result = snippet_analyzer.analyze(request.code, request.language_hint())
    except Exception as exc:
        _telemetry["requests_failed"] += 1
        logger.error("Analysis error: %s: %s", type(exc).__name__, str(exc)[:200])
        raise HTTPException(status_code=500, detail="Internal server error")

    _telemetry["languages"][result.language.value] += 1
    logger.info(
        "Analyzed %d chars in %.3fs - language=%s complexity=%s findings=%d",
        len(request.code),
        time.perf_counter() - start_time,
        result.language.value,
        result.complexity.complexity,
        len(result.findings),
    )

    return AnalyzeResponse.from_result(result, include_tokens=request.includeTokens)


health_router = APIRouter()


@health_router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@health_router.get("/metrics")
async def metrics():
    """Request counters since process start."""
    return {
        "success": True,
        "metrics": _telemetry,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# FastAPI app assembly
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Codescope v%s starting", __version__)
    logger.info("Server: %s:%d", settings.HOST, settings.PORT)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Codescope API",
    description="Heuristic language detection, linting and complexity estimation",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors without exposing submitted code."""
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in exc.errors()[:5]
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, error_details)
    return JSONResponse(status_code=422, content={"success": False, "error": "Invalid request format"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc)[:200],
    )
    _telemetry["requests_failed"] += 1
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


app.middleware("http")(security_headers_middleware)
app.middleware("http")(request_size_middleware)

cors_origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
async def root():
    """Editor page when bundled, otherwise service info."""
    index_path = Path(settings.STATIC_DIR) / "index.html"
    if index_path.is_file():
        return FileResponse(index_path)
    return {
        "name": "Codescope API",
        "version": __version__,
        "endpoints": {
            "/api/analyze": "POST - Analyze a code snippet",
            "/health": "GET - Health check",
        },
    }


app.include_router(analysis_router, prefix="/api", tags=["analysis"])
app.include_router(analysis_router, prefix="/api/v1", tags=["analysis"])
app.include_router(analysis_router, tags=["analysis-compat"])
app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(health_router, tags=["health-compat"])
