import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from email_builder.core.config import get_settings
from email_builder.core.logging import setup_logging
from email_builder.core.database import create_db_and_tables

from email_builder.routers import core, templates as templates_router

settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application lifecycle events.

    On Startup:
    - Creates database tables if missing.
    - Creates the upload staging and download directories.
    """
    logger.info(f"{settings.APP_NAME} starting up...")
    create_db_and_tables()
    settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    settings.DOWNLOADS_DIR.mkdir(parents=True, exist_ok=True)
    logger.info(f"{settings.APP_NAME} started successfully.")

    yield
    logger.info(f"{settings.APP_NAME} shutting down...")

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    lifespan=lifespan
)

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Returns the error detail as plain text."""
    return Response(content=str(exc.detail), status_code=exc.status_code)

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Catches unhandled exceptions and returns a flat error response."""
    logger.exception("Unhandled exception")
    return Response(content="Internal Server Error", status_code=500)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Security Headers Middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response

app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

app.include_router(core.router)
app.include_router(templates_router.router)
