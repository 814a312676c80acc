"""
FastAPI application bootstrap with: \n
- Lifespan-managed logging setup and table creation \n
- CORS configured for browser clients \n
- Request-id correlation middleware \n
- Generic 500 handler for uncaught failures \n
- The dashboard page at `/` \n

Environment contract (from `settings`): \n
- INIT_MODE: if 'runtime', create missing tables during app startup. \n
- FRONTEND_URL: allowed CORS origin (default `*`). \n

Run with: `uvicorn feedback_aggregator.main:app`
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from feedback_aggregator.api.fast_api import router
from feedback_aggregator.database.config.config import settings
from feedback_aggregator.database.create_tables import create_tables
from feedback_aggregator.logging_config import configure_logging, create_request_context_middleware

logger = logging.getLogger(__name__)

DASHBOARD_PATH = Path(__file__).resolve().parent / "static" / "dashboard.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup: configure logging; if INIT_MODE == 'runtime', create missing tables.
    - Nothing is held across requests, so shutdown only logs.
    """
    configure_logging()
    if settings.INIT_MODE == "runtime":
        create_tables()
    else:
        logger.info("Skipping table creation (INIT_MODE=%s)", settings.INIT_MODE)

    yield
    logger.info("Feedback dashboard shutting down")


app = FastAPI(title="Feedback Aggregator Dashboard", lifespan=lifespan)
"""FastAPI application object serving the dashboard and its JSON API."""

# -----------------------
# Middleware
# -----------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_methods=["*"],
    allow_headers=["*"],
)
create_request_context_middleware(app)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the failure and answer with a generic 500 body."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


# -----------------------
# API routes
# -----------------------
app.include_router(router)


@app.get("/", include_in_schema=False)
async def serve_dashboard():
    """Serve the single-page dashboard."""
    return FileResponse(DASHBOARD_PATH, media_type="text/html")
