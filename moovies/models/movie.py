# moovies/models/movie.py
"""Movie model"""
from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class Movie(Base):
    __tablename__ = "moovie"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=False, index=True)
    # Stored column keeps its historical spelling
    release_date = Column("realease_date", Date, nullable=True)

    # Relationships
    category = relationship("Category", back_populates="movies")

    def __repr__(self):
        return f"<Movie(id={self.id}, title={self.title})>"
