from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Domain record for a stored movie document.

    Stored documents are not schema-checked: any extra fields they hold are
    kept as extra attributes and written back on update. The creation
    timestamp is stored under ``createdAt``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_document(cls, document_id: str, data: Dict[str, Any]) -> "Movie":
        # Bypass validation so malformed documents pass through as stored
        fields = {key: value for key, value in data.items() if key != "id"}
        return cls.model_construct(id=document_id, **fields)

    def to_document(self) -> Dict[str, Any]:
        # Only fields the document holds or that were assigned since; defaults are never written
        return self.model_dump(exclude={"id"}, exclude_unset=True, by_alias=True, warnings=False)
