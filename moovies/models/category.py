# moovies/models/category.py
"""Category model - Groups movies by type (Action, Drama, Comedy, etc)"""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from ..database import Base


class Category(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    movies = relationship("Movie", back_populates="category", passive_deletes="all")

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
