"""Example route that only checks the bearer token."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from blog_api.application.pipeline import Authenticator, RequestContext, RequestPipeline, RequestShape
from blog_api.application.schemas import MessageResponse
from blog_api.infrastructure.dependencies import get_authenticator, get_pipeline
from blog_api.presentation.api.http import json_response, read_request

router = APIRouter(tags=["Example"])

NO_INPUT = RequestShape()


@router.get("/protected", response_model=MessageResponse)
async def protected(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    authenticator: Authenticator = Depends(get_authenticator),
) -> Response:
    async def handler(ctx: RequestContext) -> Response:
        return json_response(MessageResponse(message="You have access to this protected route!"))

    return await pipeline.run(await read_request(request), NO_INPUT, handler, stages=[authenticator])
