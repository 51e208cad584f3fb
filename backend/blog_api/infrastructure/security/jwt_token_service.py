"""Signed bearer tokens (JWT) via python-jose."""

import logging
import re
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from blog_api.application.interfaces import TokenService
from blog_api.domain.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

_USER_ID = re.compile(r"[0-9]+")


class JWTTokenService(TokenService):
    """Issues HS256 tokens carrying the user ID in ``sub`` and a fixed expiry.

    The secret is read-only after construction, so one instance is shared by
    all requests.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expires_minutes)

    def issue(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self._expires,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise UnauthenticatedError("Token has expired")
        except JWTError as e:
            logger.debug("JWT validation failed: %s", e)
            raise UnauthenticatedError("Invalid token")

        subject = payload.get("sub")
        if not isinstance(subject, str) or not _USER_ID.fullmatch(subject):
            raise UnauthenticatedError("Invalid token: malformed user ID")
        return int(subject)
