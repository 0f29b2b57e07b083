"""
Main FastAPI application for the event analytics subgraph
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..analytics.base import AnalyticsProvider
from ..analytics.factory import create_analytics_provider
from ..config import Settings
from ..config import settings as default_settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    analytics_provider: AnalyticsProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app from; the global settings when omitted
        analytics_provider: Provider serving ``eventAnalytics``; built from
            the settings when omitted
    """
    settings = settings or default_settings
    provider = analytics_provider or create_analytics_provider(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Starting event analytics subgraph...",
            mock_data=settings.use_mock_data,
            supergraph_url=settings.supergraph_url,
        )

        from ..validation import ValidationError, validate_startup_configuration

        try:
            await validate_startup_configuration(settings)
        except ValidationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error during startup validation",
                error=str(e),
                note="Application will continue but may have configuration issues",
            )

        yield

        logger.info("Shutting down event analytics subgraph...")

    app = FastAPI(
        title="Event Analytics Subgraph",
        description="Event and guest analytics aggregated from the supergraph",
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

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(provider, graphiql=settings.debug)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server must not start with a broken schema
        raise

    return app


# Configure logging before creating the main application instance
configure_logging(debug=default_settings.debug, level=default_settings.log_level)
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "event_analytics.api.app:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
