"""
Main FastAPI application for Roster backend
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..errors import RosterError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..security import BcryptHasher, PasswordHasher
from ..store import Store, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


async def ensure_store_connected(app: FastAPI) -> bool:
    """Run the store's connect step once it is reachable.

    Called at startup and again before serving requests until it succeeds, so
    the unique indexes on users exist as soon as the backend comes back.

    Returns:
        Whether the store has been connected
    """
    if app.state.store_connected:
        return True

    async with app.state.store_connect_lock:
        if app.state.store_connected:
            return True

        store: Store = app.state.store
        ok, error = await store.ping()
        if not ok:
            logger.error("Store is not reachable", error=error)
            return False

        try:
            await store.connect()
        except RosterError as e:
            logger.error("Store connection failed", error=e.message)
            return False

        app.state.store_connected = True
        return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Roster API...")

    if not await ensure_store_connected(app):
        # Requests fail with ADAPTER_UNAVAILABLE until the store comes back
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError("Store is not reachable")

    yield

    logger.info("Shutting down Roster API...")
    await app.state.store.close()


def create_app(store: Store | None = None, hasher: PasswordHasher | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Persistence handle; built from settings when omitted
        hasher: Password hasher; bcrypt with the configured cost when omitted
    """
    app = FastAPI(
        title="Roster API",
        description="GraphQL API for user accounts and employee records",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.store = store if store is not None else create_store(settings)
    app.state.hasher = hasher if hasher is not None else BcryptHasher(settings.password_hash_rounds)
    app.state.store_connected = False
    app.state.store_connect_lock = asyncio.Lock()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        connected = await ensure_store_connected(request.app)
        store_ok, _ = await request.app.state.store.ping()
        return {
            "status": "healthy",
            "version": __version__,
            "store": "ok" if store_ok else "unreachable",
            "connected": connected,
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(graphiql=settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


def get_app() -> FastAPI:
    """App factory used by uvicorn (``roster.api.app:get_app``)."""
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "roster.api.app:get_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
