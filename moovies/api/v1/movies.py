# moovies/api/v1/movies.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ...config import settings
from ...crud.movie import movie_store
from ...database import get_db
from ...exceptions import MOVIE_NOT_FOUND, NotFoundError
from ...schemas.movie import Movie, MovieCreate, MovieUpdate, MovieWithCategory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])


def format_movie(row) -> dict:
    """Helper function to flatten a joined row into a movie with category fields"""
    movie = row.Movie
    return {
        "id": movie.id,
        "title": movie.title,
        "description": movie.description,
        "category_id": movie.category_id,
        "release_date": movie.release_date,
        "category_name": row.category_name,
        "category_description": row.category_description,
    }


@router.get("", response_model=List[MovieWithCategory])
def list_movies(db: Session = Depends(get_db)):
    """Get all movies with their category"""
    try:
        rows = movie_store.find_all(db)
        logger.info(f"Found {len(rows)} movies")
        return [format_movie(row) for row in rows]
    except Exception as e:
        logger.error(f"Error fetching movies: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{movie_id}", response_model=MovieWithCategory)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get single movie by ID"""
    try:
        return format_movie(movie_store.find(db, id=movie_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching movie {movie_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
def create_movie(movie_data: MovieCreate, db: Session = Depends(get_db)):
    """Create new movie after checking its category exists"""
    try:
        movie = movie_store.create(db, obj_in=movie_data)
        logger.info(f"✅ Movie created: {movie.id} {movie.title}")
        return movie
    except NotFoundError as e:
        logger.warning(f"Movie not created, category {movie_data.category_id} does not exist")
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error creating movie: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.put("", response_model=Optional[Movie])
def update_movie(movie_data: MovieUpdate, db: Session = Depends(get_db)):
    """Replace every field of a movie; null body when the id is unknown"""
    try:
        movie = movie_store.update(db, obj_in=movie_data)
    except NotFoundError as e:
        logger.warning(f"Movie {movie_data.id} not updated, category {movie_data.category_id} does not exist")
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error updating movie {movie_data.id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if movie is None:
        logger.warning(f"Update skipped, movie {movie_data.id} does not exist")
        if settings.STRICT_MISSING_IDS:
            raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
        return None

    logger.info(f"✅ Movie updated: {movie.id}")
    return movie


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete movie; 304 when nothing was removed"""
    try:
        removed = movie_store.remove(db, id=movie_id)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error deleting movie {movie_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not removed:
        if settings.STRICT_MISSING_IDS:
            raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)

    logger.info(f"🗑️ Movie deleted: {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
