"""
Movies Library Backend — Health Check Route
=============================================

What:  Liveness endpoint for monitoring and load balancer checks.
How:   Reports that the process is serving requests. It does not query the
       database; a failed connection already prevents startup.
"""

from fastapi import APIRouter

from movielib.schemas.movie import ErrorResponse, MessageResponse

router = APIRouter(tags=["Health"])

HEALTHY_MESSAGE = "Server is up and running"


@router.get(
    "/health-check",
    response_model=MessageResponse,
    responses={500: {"description": "Internal server error.", "model": ErrorResponse}},
    summary="Service health check",
    description="Check if the server is up and running.",
)
async def health_check() -> MessageResponse:
    return MessageResponse(message=HEALTHY_MESSAGE)
