from .category import category_store, CategoryStore
from .movie import movie_store, MovieStore

__all__ = ["category_store", "CategoryStore", "movie_store", "MovieStore"]
