"""
Main FastAPI application for the socialgraph backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..errors import ConfigurationError
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.connection import check_store_connection, close_store, init_store

configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting socialgraph API...")
    init_store()

    success, error_message = await check_store_connection()
    if success:
        logger.info("Entity store connection validated")
    else:
        logger.error("Entity store connection failed", error=error_message)
        if settings.environment.lower() in ("production", "prod"):
            raise ConfigurationError(f"Entity store unavailable: {error_message}")

    yield

    logger.info("Shutting down socialgraph API...")
    await close_store()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="socialgraph API",
        description="Users, posts and comments over a document store",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "socialgraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
