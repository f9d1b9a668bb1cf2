"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from datacatalog.api.deps import CatalogDep
from datacatalog.api.v1 import api_router
from datacatalog.catalog import Catalog
from datacatalog.core.config import get_settings
from datacatalog.schemas.common import HealthResponse
from datacatalog.services.exceptions import (
    ConflictError,
    NotFoundError,
    OperationInProgressError,
    PersistenceError,
    ReferentialError,
    ServiceError,
    ValidationError,
)

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the catalog (backend, store and live sync) for the app's lifetime."""
    # Startup
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    catalog = Catalog.from_settings(settings)
    await catalog.open()
    app.state.catalog = catalog
    yield
    # Shutdown
    await catalog.close()


app = FastAPI(
    title=settings.app_name,
    description="A catalog of the data types an urban analysis needs and the datasets that satisfy them",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware - configurable via settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers for service layer exceptions
@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Convert NotFoundError to 404 response."""
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_exception_handler(request: Request, exc: ConflictError):
    """Convert ConflictError to 409 response."""
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(OperationInProgressError)
async def in_progress_exception_handler(request: Request, exc: OperationInProgressError):
    """Convert OperationInProgressError to 409 response."""
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Convert ValidationError to 400 response."""
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ReferentialError)
async def referential_exception_handler(request: Request, exc: ReferentialError):
    """Convert ReferentialError to 422 response."""
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(PersistenceError)
async def persistence_exception_handler(request: Request, exc: PersistenceError):
    """Convert PersistenceError to 503 response."""
    logger.error(f"Write failed: {exc.message}")
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    """Convert generic ServiceError to 500 response."""
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check(catalog: CatalogDep):
    """Health check endpoint. ``synced`` is false until every collection has loaded."""
    return HealthResponse(status="healthy", app=settings.app_name, synced=catalog.store.is_loaded)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "api": settings.api_v1_prefix,
    }


# Include API v1 router
app.include_router(api_router, prefix=settings.api_v1_prefix)
