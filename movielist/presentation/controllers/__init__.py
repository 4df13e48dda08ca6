from .add_movie_controller import AddMovieController
from .sign_up_controller import SignUpController

__all__ = ["AddMovieController", "SignUpController"]
