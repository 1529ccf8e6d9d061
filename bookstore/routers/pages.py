from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="", tags=["pages"])

WELCOME_TEXT = "Welcome to my bookstore API :)"


@router.get("/", response_class=PlainTextResponse)
def welcome() -> str:
    return WELCOME_TEXT
