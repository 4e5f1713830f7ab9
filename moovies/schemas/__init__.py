from moovies.schemas.category import Category, CategoryCreate, CategoryUpdate
from moovies.schemas.movie import Movie, MovieCreate, MovieUpdate, MovieWithCategory

__all__ = [
    "Category", "CategoryCreate", "CategoryUpdate",
    "Movie", "MovieCreate", "MovieUpdate", "MovieWithCategory",
]
