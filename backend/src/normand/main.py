"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Logging constants defined here because logging.basicConfig() must run
# before any module imports that might create loggers.
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    level=logging.INFO,
)

# Unify uvicorn loggers with app format
for uvicorn_logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
    uvicorn_logger = logging.getLogger(uvicorn_logger_name)
    uvicorn_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    uvicorn_logger.addHandler(handler)

from normand.api.routers import auth, menu, pages  # noqa: E402
from normand.config import ConfigError, load_settings  # noqa: E402
from normand.errors import AdminError  # noqa: E402

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    """Allowed admin panel origins, falling back to the local dev server."""
    try:
        return list(load_settings().cors_origins)
    except (ValueError, ConfigError):
        return ["http://localhost:7001"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan handler for startup and shutdown events.

    On startup, reports the site root and warns when admin login is not
    configured.
    """
    try:
        settings = load_settings()
    except (ValueError, ConfigError) as e:
        logger.warning(f"Settings not loaded at startup: {e}")
    else:
        logger.info(f"Site root: {settings.site_root}")
        if not settings.admin_password_hash or not settings.admin_token_secret:
            logger.warning("ADMIN_PASSWORD_HASH or ADMIN_TOKEN_SECRET not set - admin login disabled")
        logger.info("Normand admin started")

    yield


app = FastAPI(
    title="Normand Admin",
    description="Content and navigation admin API for the Normand PLLC site",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AdminError)
async def admin_error_handler(request: Request, exc: AdminError) -> JSONResponse:
    """Render admin errors as ``{"error", "details"}`` bodies."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests in the same shape as other errors."""
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(auth.router)
app.include_router(menu.router)
app.include_router(pages.router)
