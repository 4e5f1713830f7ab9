# moovies/api/v1/categories.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ...config import settings
from ...crud.category import category_store
from ...database import get_db
from ...exceptions import CATEGORY_NOT_FOUND, NotFoundError
from ...schemas.category import Category, CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
def list_categories(db: Session = Depends(get_db)):
    """Get all categories"""
    try:
        categories = category_store.find_all(db)
        logger.info(f"Found {len(categories)} categories")
        return categories
    except Exception as e:
        logger.error(f"Error fetching categories: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{category_id}", response_model=Category)
def get_category(category_id: int, db: Session = Depends(get_db)):
    """Get single category by ID"""
    try:
        return category_store.find(db, id=category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching category {category_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """Create new category"""
    try:
        category = category_store.create(db, obj_in=category_data)
        logger.info(f"Category created: {category.id} {category.name}")
        return category
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating category: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.put("", response_model=Optional[Category])
def update_category(category_data: CategoryUpdate, db: Session = Depends(get_db)):
    """Replace name and description of a category; null body when the id is unknown"""
    try:
        category = category_store.update(db, obj_in=category_data)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating category {category_data.id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if category is None:
        logger.warning(f"Update skipped, category {category_data.id} does not exist")
        if settings.STRICT_MISSING_IDS:
            raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND)
        return None

    logger.info(f"Category updated: {category.id}")
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Delete category; 304 when nothing was removed"""
    try:
        removed = category_store.remove(db, id=category_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting category {category_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not removed:
        if settings.STRICT_MISSING_IDS:
            raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND)
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)

    logger.info(f"Category deleted: {category_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
