"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from draftpress import __version__
from draftpress.api import auth, generate, posts
from draftpress.api.errors import register_exception_handlers
from draftpress.config import Settings, get_settings
from draftpress.database import Database
from draftpress.services.generation import BlogGenerator, get_blog_generator
from draftpress.services.tokens import TokenService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set the root log level and format once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    generator: BlogGenerator | None = None,
) -> FastAPI:
    """Build the application.

    Collaborators that are not passed in are built from settings, so tests can
    hand in an in-memory database and a fake generator.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    # Collaborators handed in by the caller are closed by the caller
    owns_database = database is None
    owns_generator = generator is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database on startup and release owned resources on shutdown."""
        db = app.state.database
        if not settings.is_production:
            # Production schema is managed by Alembic migrations
            db.create_all()
        logger.info(f"Started in {settings.environment} mode")
        yield
        if owns_generator:
            await app.state.generator.aclose()
        if owns_database:
            db.dispose()

    app = FastAPI(
        title="Draftpress API",
        description="Blog drafting with AI generation and per-user post management",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url)
    app.state.token_service = TokenService.from_settings(settings)
    app.state.generator = generator or get_blog_generator(settings)

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(posts.router)
    app.include_router(generate.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
