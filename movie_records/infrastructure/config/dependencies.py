from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from movie_records.applications.services.movie_record_service import MovieRecordService
from movie_records.domain.models.movie_service_config import MovieServiceConfig
from movie_records.domain.ports.repositories.document_repository import DocumentRepository
from movie_records.domain.ports.services.logger import LoggerPort
from movie_records.infrastructure.adapters.repositories.mongo_document_repository import MongoDocumentRepository
from movie_records.infrastructure.config.settings import Settings
from movie_records.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_records.infrastructure.persistence.database import get_database


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_records")


def get_settings() -> Settings:
    return Settings()


def get_movie_service_config(settings: Annotated[Settings, Depends(get_settings)]) -> MovieServiceConfig:
    return MovieServiceConfig.from_settings(settings)


def get_document_repository(database: Annotated[AsyncIOMotorDatabase, Depends(get_database)]) -> DocumentRepository:
    return MongoDocumentRepository(database)


def get_movie_record_service(
    document_repository: Annotated[DocumentRepository, Depends(get_document_repository)],
    config: Annotated[MovieServiceConfig, Depends(get_movie_service_config)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieRecordService:
    return MovieRecordService(document_repository=document_repository, config=config, logger=logger)
