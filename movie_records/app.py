from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, HTTPException

from movie_records.applications.interfaces.dtos.message import Message
from movie_records.infrastructure.config.dependencies import get_logger
from movie_records.infrastructure.logging.logger import setup_logging
from movie_records.infrastructure.persistence.database import check_connection, dispose_client, get_client
from movie_records.presentation.routers import movies

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_client()
    try:
        yield
    finally:
        dispose_client()


app = FastAPI(lifespan=lifespan)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "ok"}


@app.get("/health", response_model=Message)
async def health():
    if await check_connection():
        return {"message": "database connected"}
    get_logger().warning("Database ping failed")
    raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="database unavailable")
