# Local application imports
from typing import Optional

from .base_container import BaseContainer
from .providers import (
    AccountProvider,
    DatabaseProvider,
    MovieProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories and catalogs (RepositoryProvider) - depend on database
    3. Use cases and controllers (AccountProvider, MovieProvider) - depend on repositories
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases → controllers
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        AccountProvider.register(self)
        MovieProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container; the next get_container() builds a fresh one."""
    global _container
    _container = None
