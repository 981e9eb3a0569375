from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movie_records.infrastructure.config.settings import Settings


class _ClientStore:
    client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    if _ClientStore.client is None:
        settings = Settings()
        _ClientStore.client = AsyncIOMotorClient(
            settings.MONGODB_URL,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
    return _ClientStore.client


def get_database() -> AsyncIOMotorDatabase:
    settings = Settings()
    return get_client()[settings.MONGODB_DATABASE]


async def check_connection() -> bool:
    if _ClientStore.client is None:
        return False

    try:
        await _ClientStore.client.admin.command("ping")
        return True
    except PyMongoError:
        return False


def dispose_client() -> None:
    if _ClientStore.client is not None:
        _ClientStore.client.close()
        _ClientStore.client = None
