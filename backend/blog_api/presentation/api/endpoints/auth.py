"""Registration and login endpoints."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response

from blog_api.application.pipeline import RequestContext, RequestPipeline, RequestShape
from blog_api.application.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from blog_api.application.services import AuthService
from blog_api.infrastructure.dependencies import get_auth_service, get_pipeline
from blog_api.presentation.api.http import json_body, json_response, read_request

router = APIRouter(prefix="/auth", tags=["Auth"])

REGISTER = RequestShape(body=RegisterRequest)
LOGIN = RequestShape(body=LoginRequest)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(RegisterRequest),
)
async def register(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: AuthService = Depends(get_auth_service),
) -> Response:
    """Create an account. Username and email must both be unused."""

    async def handler(ctx: RequestContext[None, None, RegisterRequest]) -> Response:
        user = await service.register(ctx.body)
        payload = RegisterResponse(
            message="User registered",
            user=UserResponse.model_validate(user, from_attributes=True),
        )
        return json_response(payload, status_code=status.HTTP_201_CREATED)

    return await pipeline.run(await read_request(request), REGISTER, handler)


@router.post("/login", response_model=LoginResponse, openapi_extra=json_body(LoginRequest))
async def login(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: AuthService = Depends(get_auth_service),
) -> Response:
    """Exchange email and password for a bearer token."""

    async def handler(ctx: RequestContext[None, None, LoginRequest]) -> Response:
        user, token = await service.login(ctx.body)
        payload = LoginResponse(
            message="Login successful",
            user=UserResponse.model_validate(user, from_attributes=True),
            token=token,
        )
        return json_response(payload)

    return await pipeline.run(await read_request(request), LOGIN, handler)
