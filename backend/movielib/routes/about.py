"""
Movies Library Backend — Static Text Routes
=============================================

What:  GET /about, and the optional-character route GET /ab?cd.

The `b` in /ab?cd is optional, so the route answers both /abcd and /acd.
Starlette paths have no optional-character syntax; each spelling is
registered explicitly and only the first one is documented.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["About"])

ABOUT_TEXT = "about"
OPTIONAL_CHARACTER_TEXT = "ab?cd"


@router.get(
    "/about",
    response_class=PlainTextResponse,
    summary="About page",
    description="Get information about the About page.",
)
async def about() -> str:
    return ABOUT_TEXT


@router.get(
    "/abcd",
    response_class=PlainTextResponse,
    summary="Optional-character route",
    description="This endpoint is valid for /abcd and /acd.",
)
@router.get("/acd", response_class=PlainTextResponse, include_in_schema=False)
async def optional_character_route() -> str:
    return OPTIONAL_CHARACTER_TEXT
