"""
Membership Backend — Health Check Route
=========================================

What:  Liveness probe for load balancers and container health checks.
How:   Answers 200 with the plain text body "OK". It does not touch the
       database, so it reports that the process is serving requests,
       nothing more.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Service liveness check",
)
async def health_check() -> PlainTextResponse:
    return PlainTextResponse("OK")
