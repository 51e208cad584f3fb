"""Per-request values threaded through the pipeline by parameter."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import UnauthenticatedError

ParamsT = TypeVar("ParamsT")
QueryT = TypeVar("QueryT")
BodyT = TypeVar("BodyT")


@dataclass(frozen=True)
class RawRequest:
    """The untrusted sections of an inbound request, before validation.

    ``body`` is the decoded JSON document (None when the request had no body);
    ``body_error`` is set instead when the body could not be decoded.
    """

    params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    body_error: str | None = None
    authorization: str | None = None


@dataclass(frozen=True)
class RequestContext(Generic[ParamsT, QueryT, BodyT]):
    """Validated request plus whatever the stages so far have established.

    Immutable: a stage that learns something returns a new context.
    ``identity`` is only ever set by the authenticator.
    """

    raw: RawRequest
    params: ParamsT
    query: QueryT
    body: BodyT
    identity: Identity | None = None

    def with_identity(self, identity: Identity) -> "RequestContext[ParamsT, QueryT, BodyT]":
        return replace(self, identity=identity)

    def require_identity(self) -> Identity:
        if self.identity is None:
            raise UnauthenticatedError()
        return self.identity
