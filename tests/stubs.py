"""
Test doubles shared across the suite.
"""
from typing import Dict, List, Optional

from movielist.domain.models.account import Account
from movielist.domain.models.movie import Genre, Movie, ProductionCompany, ProductionCountry, SpokenLanguage
from movielist.domain.repositories.account_repository import AccountRepository
from movielist.domain.repositories.movie_catalog import MovieCatalog
from movielist.domain.repositories.movie_repository import MovieRepository


def make_movie(**overrides) -> Movie:
    data = dict(
        adult=False,
        backdrop_path="/path/to/backdrop.jpg",
        budget=150000000,
        genres=[Genre(id=1, name="Action"), Genre(id=2, name="Adventure")],
        id=123,
        imdb_id="tt1234567",
        original_language="en",
        original_title="Mock Movie",
        overview="This is a brief description of the mock movie.",
        popularity=1500,
        poster_path="/path/to/poster.jpg",
        production_companies=[
            ProductionCompany(id=1, logo_path="/path/to/logo.png", name="Mock Production Company", origin_country="US"),
        ],
        production_countries=[ProductionCountry(iso_3166_1="US", name="United States")],
        release_date="2024-08-22",
        revenue=500000000,
        runtime=120,
        spoken_languages=[SpokenLanguage(english_name="English", iso_639_1="en", name="English")],
        status="Released",
        title="Mock Movie",
        video=False,
        vote_average=8.5,
        vote_count=12000,
        user_id="user-1234",
    )
    data.update(overrides)
    return Movie(**data)


def make_account(**overrides) -> Account:
    data = dict(
        id="valid_id",
        name="valid_name",
        email="valid_email@gmail.com",
        password="hashed_password",
    )
    data.update(overrides)
    return Account(**data)


class InMemoryAccountRepository(AccountRepository):
    def __init__(self):
        self.accounts: Dict[str, Account] = {}
    
    def add(self, account: Account) -> Account:
        if account.email in self.accounts:
            raise ValueError(f"Email '{account.email}' is already registered")
        self.accounts[account.email] = account
        return account
    
    def find_by_email(self, email: str) -> Optional[Account]:
        return self.accounts.get(email)


class InMemoryMovieRepository(MovieRepository):
    def __init__(self):
        self.movies: Dict[tuple, Movie] = {}
    
    def add(self, movie: Movie) -> Movie:
        self.movies[(movie.id, movie.user_id)] = movie
        return movie


class DictMovieCatalog(MovieCatalog):
    def __init__(self, movies: Dict[str, Movie]):
        self.movies = movies
        self.requested: List[str] = []
    
    async def get_movie(self, movie_id: str) -> Optional[Movie]:
        self.requested.append(movie_id)
        return self.movies.get(movie_id)
