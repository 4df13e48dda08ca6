from .account import Account, AddAccountModel
from .movie import Genre, Movie, ProductionCompany, ProductionCountry, SpokenLanguage

__all__ = [
    "Account",
    "AddAccountModel",
    "Genre",
    "Movie",
    "ProductionCompany",
    "ProductionCountry",
    "SpokenLanguage",
]
