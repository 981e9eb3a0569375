from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from movie_records.domain.models.document import StoredDocument


class DocumentRepository(ABC):
    @abstractmethod
    async def create_document(self, collection_name: str, record: Dict[str, Any]) -> str:
        """Persist a new document and return the key assigned by the store"""
        pass

    @abstractmethod
    async def get_documents(self, collection_name: str) -> List[StoredDocument]:
        pass

    @abstractmethod
    async def get_document_by_id(self, collection_name: str, document_id: str) -> Optional[StoredDocument]:
        pass

    @abstractmethod
    async def update_document(self, collection_name: str, document_id: str, record: Dict[str, Any]) -> None:
        """Overwrite the whole stored document with ``record``"""
        pass

    @abstractmethod
    async def delete_document(self, collection_name: str, document_id: str) -> None:
        pass
