import copy
import uuid
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from movie_records.app import app
from movie_records.applications.services.movie_record_service import MovieRecordService
from movie_records.domain.models.document import StoredDocument
from movie_records.domain.models.movie_service_config import MovieServiceConfig
from movie_records.domain.ports.repositories.document_repository import DocumentRepository
from movie_records.domain.ports.services.logger import LoggerPort
from movie_records.infrastructure.config.dependencies import get_movie_record_service


class InMemoryDocumentRepository(DocumentRepository):
    """Dict-backed document store that records every call it receives"""

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.calls: List[str] = []

    def _collection(self, collection_name: str) -> Dict[str, Dict[str, Any]]:
        return self.collections.setdefault(collection_name, {})

    async def create_document(self, collection_name: str, record: Dict[str, Any]) -> str:
        self.calls.append("create_document")
        document_id = uuid.uuid4().hex
        self._collection(collection_name)[document_id] = copy.deepcopy(record)
        return document_id

    async def get_documents(self, collection_name: str) -> List[StoredDocument]:
        self.calls.append("get_documents")
        return [
            StoredDocument(id=document_id, fields=fields)
            for document_id, fields in self._collection(collection_name).items()
        ]

    async def get_document_by_id(self, collection_name: str, document_id: str) -> Optional[StoredDocument]:
        self.calls.append("get_document_by_id")
        fields = self._collection(collection_name).get(document_id)
        return StoredDocument(id=document_id, fields=fields) if fields is not None else None

    async def update_document(self, collection_name: str, document_id: str, record: Dict[str, Any]) -> None:
        self.calls.append("update_document")
        self._collection(collection_name)[document_id] = copy.deepcopy(record)

    async def delete_document(self, collection_name: str, document_id: str) -> None:
        self.calls.append("delete_document")
        self._collection(collection_name).pop(document_id, None)


@pytest.fixture
def movie_service_config():
    return MovieServiceConfig(collection_name="movies")


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def mock_document_repository():
    """Mock document repository for service testing"""
    return AsyncMock(spec=DocumentRepository)


@pytest.fixture
def in_memory_repository():
    return InMemoryDocumentRepository()


@pytest.fixture
def movie_service(in_memory_repository, movie_service_config, mock_logger):
    return MovieRecordService(in_memory_repository, movie_service_config, mock_logger)


@pytest.fixture
def dune_data():
    return {"title": "Dune", "description": "Desert planet", "genre": "Sci-Fi", "rating": 8.5}


@pytest_asyncio.fixture
async def client(movie_service):
    """HTTP client bound to the app with the in-memory service injected"""
    app.dependency_overrides[get_movie_record_service] = lambda: movie_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
