"""Schema validation, the first stage of every route.

A ``RequestShape`` names the pydantic model each request section must
satisfy.  Sections are checked independently so that one round trip reports
every problem: a bad path ID and a too-short title are returned together.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog_api.application.pipeline.context import RawRequest, RequestContext
from blog_api.application.pipeline.result import Failure, StageResult, Success
from blog_api.domain.exceptions import ValidationError, Violation

P = TypeVar("P", bound=BaseModel)
Q = TypeVar("Q", bound=BaseModel)
B = TypeVar("B", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


@dataclass(frozen=True)
class RequestShape(Generic[P, Q, B]):
    """Declared shape of a route's params, query and body. ``None`` skips a section."""

    params: type[P] | None = None
    query: type[Q] | None = None
    body: type[B] | None = None


def validate_request(shape: RequestShape, raw: RawRequest) -> StageResult[RequestContext]:
    """Validate all three sections; never touches the store."""
    violations: list[Violation] = []

    params = _validate_section("params", shape.params, raw.params, violations)
    query = _validate_section("query", shape.query, raw.query, violations)

    body = None
    if shape.body is not None:
        if raw.body_error is not None:
            violations.append(Violation("body", raw.body_error))
        else:
            # An absent body is checked as an empty object so every missing
            # field gets reported.
            document = {} if raw.body is None else raw.body
            body = _validate_section("body", shape.body, document, violations)

    if violations:
        return Failure(ValidationError(violations))
    return Success(RequestContext(raw=raw, params=params, query=query, body=body))


def _validate_section(
    section: str,
    model: type[BaseModel] | None,
    data: Any,
    violations: list[Violation],
) -> BaseModel | None:
    if model is None:
        return None
    if not isinstance(data, Mapping):
        violations.append(Violation(section, "Expected a JSON object"))
        return None
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        violations.extend(_to_violations(section, exc))
        return None


def _to_violations(section: str, exc: PydanticValidationError) -> list[Violation]:
    result = []
    for error in exc.errors():
        location = ".".join([section, *(str(part) for part in error["loc"])])
        message = error["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        result.append(Violation(location, message))
    return result
