from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from bookstore.routers.deps import book_service
from bookstore.schemas import Book, BookCreate, BookUpdate, error_responses
from bookstore.services.entity_service import EntityService

router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[int, Path(description="The ID of the book")]


@router.post(
    "",
    status_code=201,
    response_model=Book,
    response_model_exclude_unset=True,
    summary="Add a new book",
    description="Create a new book with title, author, publication date, and ISBN.",
    responses=error_responses("Book", 400, 500),
)
def create_book(payload: BookCreate, service: EntityService = Depends(book_service)):
    return service.create(payload.model_dump())


@router.get(
    "",
    response_model=List[Book],
    response_model_exclude_unset=True,
    summary="Retrieve all books",
    responses=error_responses("Book", 500),
)
def list_books(service: EntityService = Depends(book_service)):
    return service.list_all()


@router.get(
    "/{book_id}",
    response_model=Book,
    response_model_exclude_unset=True,
    summary="Retrieve a book by ID",
    responses=error_responses("Book", 404, 500),
)
def get_book(book_id: BookId, service: EntityService = Depends(book_service)):
    return service.get(book_id)


@router.put(
    "/{book_id}",
    response_model=Book,
    response_model_exclude_unset=True,
    summary="Update a book",
    description="Replace a book's fields. All of title, author, publicationDate and ISBN are required.",
    responses=error_responses("Book", 400, 404, 500),
)
def update_book(book_id: BookId, payload: BookUpdate, service: EntityService = Depends(book_service)):
    return service.update(book_id, payload.model_dump())


@router.delete(
    "/{book_id}",
    response_model=List[Book],
    response_model_exclude_unset=True,
    summary="Delete a book",
    description="Remove a book; the response is a one-element list holding the removed book.",
    responses=error_responses("Book", 404, 500),
)
def delete_book(book_id: BookId, service: EntityService = Depends(book_service)):
    return service.delete(book_id)
