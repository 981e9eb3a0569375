from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from movie_records.domain.models.document import StoredDocument
from movie_records.domain.ports.repositories.document_repository import DocumentRepository


class MongoDocumentRepository(DocumentRepository):
    """Document repository over a MongoDB database.

    Keys are the server-assigned ``_id`` values exposed as hex strings. Driver
    errors are left to propagate.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self.database = database

    def _collection(self, collection_name: str) -> AsyncIOMotorCollection:
        return self.database[collection_name]

    @staticmethod
    def _key(document_id: str) -> Union[ObjectId, str]:
        # Ids that are not ObjectIds are looked up verbatim and simply miss
        return ObjectId(document_id) if ObjectId.is_valid(document_id) else document_id

    @staticmethod
    def _to_stored(raw: Dict[str, Any]) -> StoredDocument:
        fields = dict(raw)
        key = fields.pop("_id")
        return StoredDocument(id=str(key), fields=fields)

    async def create_document(self, collection_name: str, record: Dict[str, Any]) -> str:
        # insert_one adds _id to the dict it is given
        result = await self._collection(collection_name).insert_one(dict(record))
        return str(result.inserted_id)

    async def get_documents(self, collection_name: str) -> List[StoredDocument]:
        cursor = self._collection(collection_name).find({})
        return [self._to_stored(raw) async for raw in cursor]

    async def get_document_by_id(self, collection_name: str, document_id: str) -> Optional[StoredDocument]:
        raw = await self._collection(collection_name).find_one({"_id": self._key(document_id)})
        return self._to_stored(raw) if raw is not None else None

    async def update_document(self, collection_name: str, document_id: str, record: Dict[str, Any]) -> None:
        replacement = {key: value for key, value in record.items() if key != "_id"}
        await self._collection(collection_name).replace_one({"_id": self._key(document_id)}, replacement)

    async def delete_document(self, collection_name: str, document_id: str) -> None:
        await self._collection(collection_name).delete_one({"_id": self._key(document_id)})
