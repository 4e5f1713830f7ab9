# moovies/db/seed.py
"""Seed sample categories into the database"""
from sqlalchemy.orm import Session
from ..models import Category
from ..database import SessionLocal
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Action", "description": "Action films"},
    {"name": "Drama", "description": "Character-driven stories with emotional depth"},
    {"name": "Comedy", "description": "Humorous films designed to make you laugh"},
    {"name": "Horror", "description": "Scary and suspenseful films"},
    {"name": "Documentary", "description": "Factual and educational content"},
]


def seed_categories(db: Session) -> int:
    """Insert the sample categories that are not there yet; returns how many were added"""
    logger.info("Seeding categories...")
    added = 0

    for category_data in CATEGORIES:
        existing = db.query(Category).filter(Category.name == category_data["name"]).first()
        if existing:
            logger.info(f"Category '{category_data['name']}' already exists, skipping...")
            continue

        db.add(Category(**category_data))
        added += 1
        logger.info(f"Added category: {category_data['name']}")

    db.commit()
    logger.info("✅ Categories seeded successfully!")
    return added


def main():
    db = SessionLocal()
    try:
        seed_categories(db)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
