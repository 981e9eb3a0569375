from typing import TYPE_CHECKING

from pydantic import BaseModel, field_validator

from movie_records.domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from movie_records.infrastructure.config.settings import Settings


class MovieServiceConfig(BaseModel):
    collection_name: str = "movies"

    @field_validator("collection_name")
    @classmethod
    def _check_collection_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ConfigurationError("Collection name must not be empty")
        return value

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MovieServiceConfig":
        return cls(collection_name=settings.MOVIES_COLLECTION)
