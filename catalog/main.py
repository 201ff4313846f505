"""Main FastAPI application."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from catalog.config import settings
from catalog.data.database.connection import engine, Base
# Import models to ensure tables are created
from catalog.data.database import Category, Product, User  # noqa: F401
from catalog.errors import CatalogError, ErrorResponse, message_for_error
from catalog.routes.categories import router as categories_router
from catalog.routes.products import router as products_router
from catalog.routes.users import router as users_router
from catalog.utils.cache import connect_cache
from catalog.utils.logging import configure_logging, get_logger

configure_logging(settings.log_level, settings.log_json)
logger = get_logger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    description="Catalog API - users, categories and products with a cached product report"
)

# Shared by every request; NullCache when Redis is not reachable
app.state.cache = connect_cache(
    settings.redis_url,
    connect_timeout=settings.redis_connect_timeout,
    socket_timeout=settings.redis_socket_timeout,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        logger.error("Request failed", path=request.url.path, code=exc.code, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response().model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    field_errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field_errors[".".join(loc) or "body"] = message_for_error(error)

    body = ErrorResponse(
        code="VALIDATION_FAILED",
        message="Validation failed",
        details={"errors": field_errors}
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


# Include routers
app.include_router(users_router)
app.include_router(categories_router)
app.include_router(products_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": settings.project_name,
        "version": settings.api_version,
        "docs": "/docs"
    }


@app.api_route("/health", methods=["GET", "HEAD"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "cache": "enabled" if app.state.cache.is_available else "disabled"}


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
