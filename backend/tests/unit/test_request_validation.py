"""Unit tests for request-shape validation."""

import pytest

from blog_api.application.pipeline import Failure, RawRequest, RequestShape, Success, validate_request
from blog_api.application.schemas import (
    ArticleCreate,
    ArticlePatch,
    PaginationQuery,
    ResourceIdParams,
)

CREATE = RequestShape(body=ArticleCreate)
UPDATE = RequestShape(params=ResourceIdParams, body=ArticleCreate)


def _violations(result) -> dict[str, str]:
    assert isinstance(result, Failure)
    return {v.location: v.message for v in result.error.violations}


def test_every_problem_is_reported_in_one_pass():
    raw = RawRequest(params={"id": "x1"}, body={"title": "Hey", "body": "short"})

    violations = _violations(validate_request(UPDATE, raw))

    assert set(violations) == {"params.id", "body.title", "body.body", "body.category"}
    assert violations["params.id"] == "ID must be a number"


@pytest.mark.parametrize("value", ["12", "0", "007"])
def test_digit_only_ids_are_accepted(value: str):
    result = validate_request(RequestShape(params=ResourceIdParams), RawRequest(params={"id": value}))

    assert isinstance(result, Success)
    assert result.value.params.id == int(value)


@pytest.mark.parametrize("value", ["abc", "-1", "1.5", "1e3", " 4", "", "99999999999"])
def test_non_digit_or_oversized_ids_are_rejected(value: str):
    result = validate_request(RequestShape(params=ResourceIdParams), RawRequest(params={"id": value}))

    assert "params.id" in _violations(result)


def test_missing_body_reports_each_required_field():
    violations = _violations(validate_request(CREATE, RawRequest(body=None)))

    assert set(violations) == {"body.title", "body.body", "body.category"}


def test_undecodable_body_is_a_violation():
    violations = _violations(validate_request(CREATE, RawRequest(body_error="Malformed JSON body")))

    assert violations == {"body": "Malformed JSON body"}


def test_non_object_body_is_a_violation():
    violations = _violations(validate_request(CREATE, RawRequest(body=["a", "list"])))

    assert violations == {"body": "Expected a JSON object"}


def test_empty_patch_message_has_no_pydantic_prefix():
    violations = _violations(validate_request(RequestShape(body=ArticlePatch), RawRequest(body={})))

    assert violations == {"body": "At least one field (title, body or category) is required"}


def test_unknown_body_fields_are_dropped():
    body = {"title": "Hello World", "body": "This is the body.", "category": "tech", "owner_id": 9}

    result = validate_request(CREATE, RawRequest(body=body))

    assert isinstance(result, Success)
    assert not hasattr(result.value.body, "owner_id")


@pytest.mark.parametrize(
    "query, expected",
    [
        ({}, (1, 10, 0)),
        ({"page": "3", "limit": "5"}, (3, 5, 10)),
        ({"page": "0", "limit": "-2"}, (1, 10, 0)),
        ({"page": "two", "limit": "ten"}, (1, 10, 0)),
        ({"page": "9" * 30, "limit": "9" * 30}, (1, 10, 0)),
        ({"page": "9" * 5000, "limit": "2147483648"}, (1, 10, 0)),
        ({"page": "2147483647", "limit": "2147483647"}, (2147483647, 2147483647, 2147483646 * 2147483647)),
    ],
)
def test_pagination_values(query: dict, expected: tuple[int, int, int]):
    result = validate_request(RequestShape(query=PaginationQuery), RawRequest(query=query))

    assert isinstance(result, Success)
    pagination = result.value.query
    assert (pagination.page, pagination.limit, pagination.offset) == expected
