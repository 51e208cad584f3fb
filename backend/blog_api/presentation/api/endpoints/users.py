"""Read-only user endpoints."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from blog_api.application.pipeline import RequestContext, RequestPipeline, RequestShape
from blog_api.application.schemas import PaginationQuery, ResourceIdParams, UserResponse
from blog_api.application.services import UserService
from blog_api.infrastructure.dependencies import get_pipeline, get_user_service
from blog_api.presentation.api.http import json_response, read_request

router = APIRouter(prefix="/users", tags=["Users"])

LIST_USERS = RequestShape(query=PaginationQuery)
USER_BY_ID = RequestShape(params=ResourceIdParams)


@router.get("", response_model=list[UserResponse])
async def list_users(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Retrieve a page of users (``?page=1&limit=10``)."""

    async def handler(ctx: RequestContext[None, PaginationQuery, None]) -> Response:
        users = await service.list_users(skip=ctx.query.offset, limit=ctx.query.limit)
        return json_response([UserResponse.model_validate(u, from_attributes=True) for u in users])

    return await pipeline.run(await read_request(request), LIST_USERS, handler)


@router.get("/{id}", response_model=UserResponse)
async def get_user(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Retrieve a single user by ID."""

    async def handler(ctx: RequestContext[ResourceIdParams, None, None]) -> Response:
        user = await service.get_user(ctx.params.id)
        return json_response(UserResponse.model_validate(user, from_attributes=True))

    return await pipeline.run(await read_request(request), USER_BY_ID, handler)
