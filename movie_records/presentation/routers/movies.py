from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_records.applications.interfaces.dtos.message import Message
from movie_records.applications.interfaces.dtos.movie import (
    MovieList,
    MoviePublic,
    MovieSchema,
    MovieUpdateSchema,
)
from movie_records.applications.services.movie_record_service import MovieRecordService
from movie_records.domain.exceptions import NotFoundError
from movie_records.domain.models.movie import Movie
from movie_records.infrastructure.config.dependencies import get_movie_record_service

router = APIRouter(prefix="/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieRecordService, Depends(get_movie_record_service)]


def _to_public(movie: Movie) -> MoviePublic:
    return MoviePublic.model_validate({"id": movie.id, **movie.to_document()})


@router.get("/", response_model=MovieList)
async def read_movies(movie_service: MovieServiceDep):
    movies = await movie_service.list_all()
    return MovieList(movies=[_to_public(movie) for movie in movies])


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: str, movie_service: MovieServiceDep):
    try:
        return _to_public(await movie_service.get_by_id(movie_id))
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_service: MovieServiceDep):
    return _to_public(await movie_service.create(movie))


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: str, movie: MovieUpdateSchema, movie_service: MovieServiceDep):
    try:
        return _to_public(await movie_service.update(movie_id, movie))
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: str, movie_service: MovieServiceDep):
    try:
        await movie_service.delete(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    return Message(message=f"Movie {movie_id} deleted successfully")
