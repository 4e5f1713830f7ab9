from typing import List, Optional
from sqlalchemy.orm import Query, Session
from ..crud.base import CRUDBase
from ..exceptions import CATEGORY_NOT_FOUND, MOVIE_NOT_FOUND, NotFoundError
from ..models.category import Category
from ..models.movie import Movie
from ..schemas.movie import MovieCreate, MovieUpdate

class MovieStore(CRUDBase[Movie, MovieCreate, MovieUpdate]):
    """
    Movies with their category inlined on reads.

    Joined reads yield rows exposing ``Movie``, ``category_name`` and
    ``category_description``. Writes verify the category first, on the
    same session, so the check and the write commit together.
    """

    def _joined(self, db: Session) -> Query:
        return (
            db.query(
                Movie,
                Category.name.label("category_name"),
                Category.description.label("category_description"),
            )
            .join(Category, Category.id == Movie.category_id)
        )

    def _ensure_category(self, db: Session, category_id: int) -> None:
        category = db.query(Category.id).filter(Category.id == category_id).first()
        if category is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)

    def find_all(self, db: Session) -> List:
        return self._joined(db).all()

    def find(self, db: Session, *, id: int):
        row = self._joined(db).filter(Movie.id == id).first()
        if row is None:
            raise NotFoundError(MOVIE_NOT_FOUND)
        return row

    def create(self, db: Session, *, obj_in: MovieCreate) -> Movie:
        self._ensure_category(db, obj_in.category_id)
        return super().create(db, obj_in=obj_in)

    def update(self, db: Session, *, obj_in: MovieUpdate) -> Optional[Movie]:
        self._ensure_category(db, obj_in.category_id)
        return super().update(db, obj_in=obj_in)

movie_store = MovieStore(Movie)
