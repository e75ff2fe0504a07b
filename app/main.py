import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from commons import limiter
from configs.config import get_config
from logging_config import setup_logging
from security import RequestIdMiddleware, SecurityHeadersMiddleware
from src.database.connection import DatabaseManager
from src.processing.errors import ProcessingError
from src.routes import job_routes

# ── Logging ──────────────────────────────────────────────────────────────────
setup_logging()
logger = logging.getLogger(__name__)

cfg = get_config()


# ── Lifespan ─────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        DatabaseManager()
        logger.info("Database manager initialized successfully")
    except PyMongoError as e:
        logger.warning(
            "Failed to initialize database: %s. "
            "Job endpoints will fail until MongoDB is reachable.", e,
        )
    yield
    if DatabaseManager._instance is not None:
        DatabaseManager._instance.close()


# ── App Factory ──────────────────────────────────────────────────────────────
app = FastAPI(
    title="Bangla Digest API",
    docs_url="/docs" if cfg.DOCS_ENABLED else None,
    redoc_url="/redoc" if cfg.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if cfg.DOCS_ENABLED else None,
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ProcessingError)
async def handle_processing_error(request: Request, exc: ProcessingError):
    logger.error(
        "Request %s %s rejected (%s): %s",
        request.method, request.url.path, exc.error_code, exc,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(PyMongoError)
async def handle_database_error(request: Request, exc: PyMongoError):
    logger.error(
        "Database error on %s %s: %s",
        request.method, request.url.path, exc, exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Database unavailable"})


# ── Middleware Stack (order matters – outermost first) ───────────────────────

# 1. Request-ID tracking
app.add_middleware(RequestIdMiddleware)

# 2. Security response headers
app.add_middleware(SecurityHeadersMiddleware)

# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(job_routes.router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


# ═══════════════════════════════════════════════════════════════════════════
#  ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    import uvicorn
    import argparse

    parser = argparse.ArgumentParser(description="Run Bangla Digest API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload on code changes")

    args = parser.parse_args()

    logger.info("Starting HTTP server on %s:%s", args.host, args.port)
    uvicorn.run(
        "main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
