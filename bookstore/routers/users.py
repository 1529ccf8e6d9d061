from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from bookstore.routers.deps import user_service
from bookstore.schemas import User, UserCreate, UserUpdate, error_responses
from bookstore.services.entity_service import EntityService

router = APIRouter(prefix="/users", tags=["users"])

UserId = Annotated[int, Path(description="The ID of the user")]


@router.post(
    "",
    status_code=201,
    response_model=User,
    response_model_exclude_unset=True,
    summary="Add a new user",
    description="Create a new user with name and email, along with purchased books.",
    responses=error_responses("User", 400, 500),
)
def create_user(payload: UserCreate, service: EntityService = Depends(user_service)):
    return service.create(payload.model_dump())


@router.get(
    "",
    response_model=List[User],
    response_model_exclude_unset=True,
    summary="Retrieve all users",
    responses=error_responses("User", 500),
)
def list_users(service: EntityService = Depends(user_service)):
    return service.list_all()


@router.get(
    "/{user_id}",
    response_model=User,
    response_model_exclude_unset=True,
    summary="Retrieve a user by ID",
    responses=error_responses("User", 404, 500),
)
def get_user(user_id: UserId, service: EntityService = Depends(user_service)):
    return service.get(user_id)


@router.put(
    "/{user_id}",
    response_model=User,
    response_model_exclude_unset=True,
    summary="Update a user",
    description="Replace a user's fields. Name and email are required; purchasedBooks is erased when omitted.",
    responses=error_responses("User", 400, 404, 500),
)
def update_user(user_id: UserId, payload: UserUpdate, service: EntityService = Depends(user_service)):
    return service.update(user_id, payload.model_dump())


@router.delete(
    "/{user_id}",
    response_model=List[User],
    response_model_exclude_unset=True,
    summary="Delete a user",
    description="Remove a user; the response is a one-element list holding the removed user.",
    responses=error_responses("User", 404, 500),
)
def delete_user(user_id: UserId, service: EntityService = Depends(user_service)):
    return service.delete(user_id)
