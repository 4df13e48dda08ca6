"""
API v1 Package
===============

Version 1 API routes.
"""
from .account_routes import router as account_router
from .movie_routes import router as movie_router

__all__ = ["account_router", "movie_router"]
