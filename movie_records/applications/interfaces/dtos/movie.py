from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MovieSchema(BaseModel):
    title: str
    description: str
    genre: str
    rating: Optional[float] = None


class MovieUpdateSchema(BaseModel):
    """Partial update; only fields that are set and not None are applied"""

    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None


class MoviePublic(BaseModel):
    """Movie as returned over HTTP; missing stored fields are null and extra ones are kept"""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class MovieList(BaseModel):
    movies: list[MoviePublic]
