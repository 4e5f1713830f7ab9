from moovies.database import Base
from moovies.models.category import Category
from moovies.models.movie import Movie

# This ensures all models are registered with Base.metadata
__all__ = ["Base", "Category", "Movie"]
