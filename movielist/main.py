"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movielist.api.v1 import account_router, movie_router
from movielist.core.config import get_settings
from movielist.di.container import get_container
from movielist.domain.repositories.movie_catalog import MovieCatalog
from movielist.infrastructure.db.mongo_connection import get_mongo_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Wire dependencies on startup; release the TMDB and MongoDB clients on shutdown."""
    container = get_container()
    logger.info("Movie List API started")
    yield
    await container.get(MovieCatalog).aclose()
    get_mongo_client().close()
    logger.info("Movie List API stopped")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Startup wiring and shutdown of the TMDB and MongoDB clients
    
    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    application = FastAPI(
        title="Movie List API",
        description="Account sign-up and movie list management",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    application.include_router(account_router, prefix="/api/v1")
    application.include_router(movie_router, prefix="/api/v1/movies")
    
    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "Movie List API",
            "version": "1.0.0",
            "docs": "/docs"
        }
    
    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}
    
    return application


# Create application instance
app = create_application()
