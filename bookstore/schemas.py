"""
Request and response models.

Create models carry the per-field rules; a failing rule surfaces as a 400
with one ``{field, message}`` entry per violation. Update models only check
types: the "all fields required" rule for PUT lives in the services, and the
create-time format rules are not reapplied.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore.domain.dates import is_calendar_date
from bookstore.domain.emails import normalize_email
from bookstore.domain.isbn import is_valid_isbn


def _required_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()


def _optional_list(value: Any, message: str) -> Any:
    if value is not None and not isinstance(value, list):
        raise ValueError(message)
    return value


# --------------------------------------------------------------- books
class BookCreate(BaseModel):
    title: Optional[str] = Field(default=None, validate_default=True, description="The title of the book.")
    author: Optional[str] = Field(default=None, validate_default=True, description="The author of the book.")
    publicationDate: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="The publication date of the book (YYYY-MM-DD).",
        json_schema_extra={"format": "date"},
    )
    ISBN: Optional[str] = Field(default=None, validate_default=True, description="The ISBN-10 or ISBN-13 of the book.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Harry Potter",
                "author": "J. K. Rowling",
                "publicationDate": "1998-07-02",
                "ISBN": "978-0747538493",
            }
        }
    )

    @field_validator("title")
    @classmethod
    def check_title(cls, value):
        return _required_text(value, "Title is required")

    @field_validator("author")
    @classmethod
    def check_author(cls, value):
        return _required_text(value, "Author is required")

    @field_validator("publicationDate")
    @classmethod
    def check_publication_date(cls, value):
        if not is_calendar_date(value):
            raise ValueError("Invalid publication date format")
        return value.strip()

    @field_validator("ISBN")
    @classmethod
    def check_isbn(cls, value):
        if not is_valid_isbn(value):
            raise ValueError("Invalid ISBN format")
        return value.strip()


class BookUpdate(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    publicationDate: Optional[str] = Field(default=None, json_schema_extra={"format": "date"})
    ISBN: Optional[str] = None


# Stored records may carry non-string values written by older clients
class Book(BaseModel):
    id: int = Field(description="Unique identifier for the book", examples=[1])
    title: Optional[Any] = Field(default=None, examples=["Harry Potter"])
    author: Optional[Any] = Field(default=None, examples=["J. K. Rowling"])
    publicationDate: Optional[Any] = Field(default=None, examples=["1998-07-02"])
    ISBN: Optional[Any] = Field(default=None, examples=["978-0747538493"])


# ------------------------------------------------------------- authors
class AuthorCreate(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True, description="The name of the author.")
    books: Optional[List[Any]] = Field(default=None, description="Books written by the author.")
    biography: Optional[str] = Field(default=None, description="A brief biography of the author.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "J. K. Rowling",
                "books": ["1"],
                "biography": "JK Rowling is a British author and philanthropist.",
            }
        }
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return _required_text(value, "Author name is required")

    @field_validator("books", mode="before")
    @classmethod
    def check_books(cls, value):
        value = _optional_list(value, "Books should be an array")
        if value is not None and any(not isinstance(item, str) for item in value):
            raise ValueError("Each book should be a string")
        return value


class AuthorUpdate(BaseModel):
    name: Optional[str] = None
    books: Optional[Any] = None
    biography: Optional[Any] = None


class Author(BaseModel):
    id: int = Field(description="Unique identifier for the author", examples=[1])
    name: Optional[Any] = Field(default=None, examples=["Darren Hardy"])
    books: Optional[Any] = Field(default=None, description="Books written by the author")
    biography: Optional[Any] = Field(default=None, description="Short biography of the author")


# --------------------------------------------------------------- users
class UserCreate(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True, description="The name of the user.")
    email: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="The email of the user; stored in canonical form.",
        json_schema_extra={"format": "email"},
    )
    purchasedBooks: Optional[List[Any]] = Field(default=None, description="Books purchased by the user.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Mostafa Faghani", "email": "faghanim@mcmaster.ca", "purchasedBooks": [1]}
        }
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return _required_text(value, "Name is required")

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        return normalize_email(value)

    @field_validator("purchasedBooks", mode="before")
    @classmethod
    def check_purchased_books(cls, value):
        return _optional_list(value, "Purchased books should be an array")


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    purchasedBooks: Optional[Any] = None


class User(BaseModel):
    id: int = Field(description="Unique identifier for the user", examples=[1])
    name: Optional[Any] = Field(default=None, examples=["Mostafa Faghani"])
    email: Optional[Any] = Field(default=None, examples=["faghanim@mcmaster.ca"])
    purchasedBooks: Optional[Any] = Field(default=None, description="Books purchased by the user")


# -------------------------------------------------------------- errors
class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = Field(examples=["not_found"])
    message: str = Field(examples=["Book not found"])
    errors: Optional[List[FieldError]] = None


def error_responses(label: str, *codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries for the error envelope."""
    descriptions = {
        400: "Missing or invalid fields",
        404: f"{label} not found",
        500: f"{label} data could not be read or saved",
    }
    return {code: {"model": ErrorResponse, "description": descriptions[code]} for code in codes}
