"""
Movie Model
===========

Domain model representing a movie in a user's list.
Field names match the TMDB movie details payload.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Genre(BaseModel):
    """A movie genre."""
    id: int
    name: str


class ProductionCompany(BaseModel):
    """A company credited with producing the movie."""
    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None


class ProductionCountry(BaseModel):
    """A country the movie was produced in."""
    iso_3166_1: str
    name: str


class SpokenLanguage(BaseModel):
    """A language spoken in the movie."""
    iso_639_1: str
    name: str
    english_name: Optional[str] = None


class Movie(BaseModel):
    """
    Domain model representing a movie.
    
    Controllers treat this as an opaque payload; only `id` is inspected
    to tell a found movie from a missing one.
    
    `user_id` is only set when the payload carries one (`userId`); catalog
    lookups leave it None, so those entries land in a shared, ownerless list.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    id: Optional[int] = Field(None, description="TMDB movie identifier")
    title: str = Field("", description="Movie title")
    original_title: Optional[str] = None
    original_language: Optional[str] = None
    overview: Optional[str] = None
    adult: bool = False
    video: bool = False
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    imdb_id: Optional[str] = None
    budget: int = 0
    revenue: int = 0
    runtime: Optional[int] = None
    popularity: float = 0.0
    release_date: Optional[str] = None
    status: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    genres: List[Genre] = Field(default_factory=list)
    production_companies: List[ProductionCompany] = Field(default_factory=list)
    production_countries: List[ProductionCountry] = Field(default_factory=list)
    spoken_languages: List[SpokenLanguage] = Field(default_factory=list)
    user_id: Optional[str] = Field(None, alias="userId", description="Owner of the list entry")
