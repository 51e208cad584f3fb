"""Ownership authorization stage.

Runs after authentication on routes that mutate an owned resource.  The
order of the checks is fixed: a missing resource is reported as not found
before ownership is ever compared, so a 403 always implies the resource
exists.  There is no lock between this read and the handler's write; the
owner of a record never changes after creation.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from blog_api.application.pipeline.context import RequestContext
from blog_api.application.pipeline.result import Failure, StageResult, Success
from blog_api.application.schemas.common import ResourceIdParams
from blog_api.domain.exceptions import EntityNotFoundError, ForbiddenError, InternalError

OwnerLookup = Callable[[int], Awaitable[int | None]]


class OwnershipAuthorizer:
    def __init__(self, entity_type: str, owner_of: OwnerLookup):
        self._entity_type = entity_type
        self._owner_of = owner_of

    async def __call__(
        self, context: RequestContext[ResourceIdParams, Any, Any]
    ) -> StageResult[RequestContext]:
        if context.identity is None:
            return Failure(InternalError("Ownership check reached without an authenticated identity"))
        params = context.params
        if params is None:
            return Failure(InternalError("Ownership check reached without a resource id"))

        owner_id = await self._owner_of(params.id)
        if owner_id is None:
            return Failure(EntityNotFoundError(self._entity_type, params.id))
        if owner_id != context.identity.user_id:
            return Failure(
                ForbiddenError(
                    f"You are not authorized to perform this action on this {self._entity_type.lower()}"
                )
            )
        return Success(context)
