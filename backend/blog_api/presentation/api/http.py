"""Glue between Starlette requests/responses and the request pipeline."""

import json
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.requests import Request

from blog_api.application.pipeline import RawRequest


async def read_request(request: Request) -> RawRequest:
    """Capture the untrusted sections of ``request`` for validation."""
    body: Any = None
    body_error: str | None = None
    raw_body = await request.body()
    if raw_body.strip():
        try:
            body = json.loads(raw_body)
        except (UnicodeDecodeError, json.JSONDecodeError):
            body_error = "Malformed JSON body"

    return RawRequest(
        params=dict(request.path_params),
        query=dict(request.query_params),
        body=body,
        body_error=body_error,
        authorization=request.headers.get("authorization"),
    )


def json_response(payload: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """``openapi_extra`` documenting a JSON body the pipeline validates itself."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
