from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import date

class MovieBase(BaseModel):
    title: str
    description: Optional[str] = None
    category_id: int
    # Older clients send the stored column spelling
    release_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("release_date", "realease_date"),
    )

class MovieCreate(MovieBase):
    pass

class MovieUpdate(MovieBase):
    id: int

class Movie(MovieBase):
    id: int

    class Config:
        from_attributes = True

class MovieWithCategory(Movie):
    category_name: str
    category_description: Optional[str] = None
