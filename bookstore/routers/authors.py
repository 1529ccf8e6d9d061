from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from bookstore.routers.deps import author_service
from bookstore.schemas import Author, AuthorCreate, AuthorUpdate, error_responses
from bookstore.services.entity_service import EntityService

router = APIRouter(prefix="/authors", tags=["authors"])

AuthorId = Annotated[int, Path(description="The ID of the author")]


@router.post(
    "",
    status_code=201,
    response_model=Author,
    response_model_exclude_unset=True,
    summary="Add a new author",
    description="Create a new author with name, biography, and associated books.",
    responses=error_responses("Author", 400, 500),
)
def create_author(payload: AuthorCreate, service: EntityService = Depends(author_service)):
    return service.create(payload.model_dump())


@router.get(
    "",
    response_model=List[Author],
    response_model_exclude_unset=True,
    summary="Retrieve all authors",
    responses=error_responses("Author", 500),
)
def list_authors(service: EntityService = Depends(author_service)):
    return service.list_all()


@router.get(
    "/{author_id}",
    response_model=Author,
    response_model_exclude_unset=True,
    summary="Retrieve an author by ID",
    responses=error_responses("Author", 404, 500),
)
def get_author(author_id: AuthorId, service: EntityService = Depends(author_service)):
    return service.get(author_id)


@router.put(
    "/{author_id}",
    response_model=Author,
    response_model_exclude_unset=True,
    summary="Update an author",
    description="Replace an author's fields. The name is required; books and biography are erased when omitted.",
    responses=error_responses("Author", 400, 404, 500),
)
def update_author(author_id: AuthorId, payload: AuthorUpdate, service: EntityService = Depends(author_service)):
    return service.update(author_id, payload.model_dump())


@router.delete(
    "/{author_id}",
    response_model=List[Author],
    response_model_exclude_unset=True,
    summary="Delete an author",
    description="Remove an author; the response is a one-element list holding the removed author.",
    responses=error_responses("Author", 404, 500),
)
def delete_author(author_id: AuthorId, service: EntityService = Depends(author_service)):
    return service.delete(author_id)
