"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .account_provider import AccountProvider
from .movie_provider import MovieProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AccountProvider",
    "MovieProvider",
]
