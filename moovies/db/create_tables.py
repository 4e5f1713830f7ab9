# moovies/db/create_tables.py
"""Create all tables fresh"""
from ..database import Base, engine
from .. import models  # noqa: F401  registers the tables on Base.metadata
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def create_tables(drop: bool = True):
    """Drop and recreate all tables"""
    logger.info("Creating all tables...")

    try:
        if drop:
            Base.metadata.drop_all(bind=engine)
            logger.info("Dropped all existing tables")

        Base.metadata.create_all(bind=engine)
        logger.info("✅ Created all tables successfully")

    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

if __name__ == "__main__":
    create_tables()
