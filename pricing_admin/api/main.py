"""
Console view API application
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pricing_admin import __version__
from pricing_admin.client import AdminAPIClient, AdminAPIError
from pricing_admin.config import settings
from pricing_admin.domain.validator import MarketplaceValidationError
from pricing_admin.monitoring import get_logger, setup_logging

from .routers import categories, custom_fields, marketplaces

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.is_production(),
    )
    logger.info("Console API starting")

    # tests may install their own client before startup
    owns_client = getattr(app.state, "admin_client", None) is None
    if owns_client:
        app.state.admin_client = AdminAPIClient(settings.admin_api)
        logger.info(f"Admin backend: {settings.admin_api.base_url}")

    yield

    logger.info("Console API stopping")
    if owns_client:
        await app.state.admin_client.close()
        app.state.admin_client = None


app = FastAPI(
    title="Pricing Admin Console API",
    description="View models for the marketplace cost editor, category list and custom field columns",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(marketplaces.router, prefix="/api/v1/marketplaces", tags=["marketplaces"])
app.include_router(categories.router, prefix="/api/v1/categories", tags=["categories"])
app.include_router(custom_fields.router, prefix="/api/v1/custom-fields", tags=["custom-fields"])


@app.exception_handler(MarketplaceValidationError)
async def form_validation_exception_handler(request: Request, exc: MarketplaceValidationError):
    """Form field rejected before reaching the backend"""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": exc.to_dict()},
    )


@app.exception_handler(AdminAPIError)
async def admin_api_exception_handler(request: Request, exc: AdminAPIError):
    """Backend failure; the page shows a retryable error state"""
    logger.error(f"Admin backend error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": {**exc.to_dict(), "path": str(request.url.path)}},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {"code": exc.status_code, "message": exc.detail, "path": str(request.url.path)}
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": {"code": 422, "message": "Validation Error", "details": jsonable_encoder(exc.errors())}},
    )


@app.get("/")
async def root():
    return {
        "name": "Pricing Admin Console API",
        "version": __version__,
        "environment": settings.env,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "version": __version__,
        "admin_api": settings.admin_api.base_url,
    }


def run():
    """Run the API server"""
    import uvicorn

    host = settings.server.host
    port = settings.server.port

    logger.info(f"Console API listening on http://{host}:{port}")

    uvicorn.run(
        "pricing_admin.api.main:app",
        host=host,
        port=port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
