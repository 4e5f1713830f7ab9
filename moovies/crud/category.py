from typing import List
from sqlalchemy.orm import Session
from ..crud.base import CRUDBase
from ..exceptions import CATEGORY_NOT_FOUND, NotFoundError
from ..models.category import Category
from ..schemas.category import CategoryCreate, CategoryUpdate

class CategoryStore(CRUDBase[Category, CategoryCreate, CategoryUpdate]):
    def find_all(self, db: Session) -> List[Category]:
        return self.get_all(db)

    def find(self, db: Session, *, id: int) -> Category:
        category = self.get(db, id)
        if category is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category


category_store = CategoryStore(Category)
