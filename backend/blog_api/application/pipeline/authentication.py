"""Bearer-token authentication stage."""

import logging

from blog_api.application.interfaces import TokenService
from blog_api.application.pipeline.context import RequestContext
from blog_api.application.pipeline.result import Failure, StageResult, Success
from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class Authenticator:
    """Turns an ``Authorization: Bearer <token>`` header into an ``Identity``.

    Stateless: each call is verified from the token alone.  The identity is
    attached to a new context and nothing from the request body is trusted.
    """

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    async def __call__(self, context: RequestContext) -> StageResult[RequestContext]:
        token = extract_bearer_token(context.raw.authorization)
        if token is None:
            return Failure(UnauthenticatedError("Missing or malformed bearer token"))

        try:
            user_id = self._tokens.verify(token)
        except UnauthenticatedError as exc:
            logger.debug("Rejected bearer token: %s", exc.message)
            return Failure(exc)

        return Success(context.with_identity(Identity(user_id=user_id)))


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token part of a bearer header, or None if absent or malformed."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]
