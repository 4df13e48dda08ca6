"""
Dependency Functions
====================

FastAPI dependencies resolving controllers from the DI container.
"""
from movielist.di.container import get_container
from movielist.presentation.controllers.add_movie_controller import AddMovieController
from movielist.presentation.controllers.sign_up_controller import SignUpController


def get_sign_up_controller() -> SignUpController:
    """
    Get sign-up controller instance (singleton).
    
    Returns:
        SignUpController instance
    """
    return get_container().get(SignUpController)


def get_add_movie_controller() -> AddMovieController:
    """
    Get add-movie controller instance (singleton).
    
    Returns:
        AddMovieController instance
    """
    return get_container().get(AddMovieController)
