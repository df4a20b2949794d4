"""
Severity Bridge FastAPI Application.

Registers analyzer rules with the host at startup and exposes the result:
  GET /health
  GET /severity-items
  GET /groups
  GET /highlight-id/{rule_id}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from severity_bridge.api.dependencies import get_application_lifetime, get_registration
from severity_bridge.api.routes.health import router as health_router
from severity_bridge.api.routes.severity import router as severity_router
from severity_bridge.config import settings
from severity_bridge.core.errors import (
    CatalogUnavailableError,
    DuplicateGroupError,
    InvalidArgumentError,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("severity_bridge")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast: a missing or broken catalog stops startup
    registration = get_registration()
    logger.info(
        f"Severity bridge ready: {len(registration.configurable_severity_items)} items"
    )
    yield
    get_application_lifetime().terminate()


app = FastAPI(
    title="Severity Bridge",
    description="Publishes static-analysis rules as configurable severity items",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(severity_router)


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
    logger.error(f"Catalog unavailable while serving {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(DuplicateGroupError)
async def duplicate_group_handler(request: Request, exc: DuplicateGroupError):
    return JSONResponse(
        status_code=409,
        content={"detail": str(exc), "group_key": exc.key},
    )
