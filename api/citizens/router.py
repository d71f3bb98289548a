"""
Citizens API endpoints.

Mounted twice: at `/citizens` and at the path Netlify routes the function
under, so the same frontend code works behind either.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from . import schemas, service

router = APIRouter()

CITIZENS_PATHS = ("/citizens", "/.netlify/functions/get-citizens")

_ERROR_RESPONSES = {
    404: {"model": schemas.ErrorResponse},
    405: {"model": schemas.ErrorResponse},
    500: {"model": schemas.ErrorResponse},
}


async def get_citizens() -> schemas.CitizensResponse:
    """
    Return every record of the configured NocoDB table.
    """
    return await service.get_citizens()


async def citizens_preflight() -> Response:
    # Preflight: headers only, empty body.
    return Response(status_code=status.HTTP_200_OK, content=b"")


for _path in CITIZENS_PATHS:
    router.add_api_route(
        _path,
        get_citizens,
        methods=["GET"],
        response_model=schemas.CitizensResponse,
        responses=_ERROR_RESPONSES,
    )
    router.add_api_route(
        _path,
        citizens_preflight,
        methods=["OPTIONS"],
        include_in_schema=False,
    )
