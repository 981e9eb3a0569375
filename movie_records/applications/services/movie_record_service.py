from datetime import datetime, timezone
from typing import List

from movie_records.applications.interfaces.dtos.movie import MovieSchema, MovieUpdateSchema
from movie_records.domain.exceptions import MovieNotFoundError
from movie_records.domain.models.movie import Movie
from movie_records.domain.models.movie_service_config import MovieServiceConfig
from movie_records.domain.ports.repositories.document_repository import DocumentRepository
from movie_records.domain.ports.services.logger import LoggerPort


class MovieRecordService:
    """CRUD access to the movies collection of a document store.

    Every operation maps to a single document repository call (update and
    delete look the movie up first). Store failures are not caught here and
    reach the caller unchanged. Returned movies are deep copies that share no
    state with the repository.
    """

    def __init__(
        self,
        document_repository: DocumentRepository,
        config: MovieServiceConfig,
        logger: LoggerPort,
    ):
        self.document_repository = document_repository
        self.config = config
        self.logger = logger

    @property
    def collection_name(self) -> str:
        return self.config.collection_name

    async def list_all(self) -> List[Movie]:
        documents = await self.document_repository.get_documents(self.collection_name)
        self.logger.debug("Fetched %d documents from '%s'", len(documents), self.collection_name)
        return [Movie.from_document(document.id, document.data()) for document in documents]

    async def get_by_id(self, movie_id: str) -> Movie:
        document = await self.document_repository.get_document_by_id(self.collection_name, movie_id)
        if document is None:
            self.logger.warning("Movie %s not found in '%s'", movie_id, self.collection_name)
            raise MovieNotFoundError(movie_id)

        movie = Movie.from_document(document.id, document.data())
        return movie.model_copy(deep=True)

    async def create(self, movie_data: MovieSchema) -> Movie:
        record = movie_data.model_dump(exclude_unset=True)
        record["createdAt"] = datetime.now(timezone.utc)

        movie_id = await self.document_repository.create_document(self.collection_name, record)
        self.logger.info("Created movie %s in '%s'", movie_id, self.collection_name)

        return Movie.from_document(movie_id, record).model_copy(deep=True)

    async def update(self, movie_id: str, movie_data: MovieUpdateSchema) -> Movie:
        movie = await self.get_by_id(movie_id)

        changes = movie_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(movie, field, value)

        await self.document_repository.update_document(self.collection_name, movie_id, movie.to_document())
        self.logger.info("Updated movie %s fields %s", movie_id, sorted(changes))

        return movie.model_copy(deep=True)

    async def delete(self, movie_id: str) -> None:
        await self.get_by_id(movie_id)
        await self.document_repository.delete_document(self.collection_name, movie_id)
        self.logger.info("Deleted movie %s from '%s'", movie_id, self.collection_name)
