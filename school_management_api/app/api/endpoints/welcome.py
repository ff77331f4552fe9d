"""Plain-text landing route."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to School Management System :)"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
