"""Request shapes shared by several routes: path identifiers and pagination."""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_INT32 = 2_147_483_647

_DIGITS = re.compile(r"[0-9]+")


class ResourceIdParams(BaseModel):
    """Path parameters for routes addressing one record by numeric ID."""

    id: int = Field(..., le=MAX_INT32)

    @field_validator("id", mode="before")
    @classmethod
    def _digits_only(cls, value: Any) -> Any:
        # Path segments arrive as strings; anything but plain digits is rejected
        # here instead of turning into a lookup miss further down.
        if not isinstance(value, str) or not _DIGITS.fullmatch(value):
            raise ValueError("ID must be a number")
        return value


def _positive_int_or(value: Any, default: int) -> int:
    # Bounded to 32 bits so the derived offset always fits a 64-bit column.
    if isinstance(value, str):
        digits = value.strip()
        if not _DIGITS.fullmatch(digits) or len(digits) > len(str(MAX_INT32)):
            return default
        value = int(digits)
    if isinstance(value, int) and not isinstance(value, bool):
        return value if 0 < value <= MAX_INT32 else default
    return default


class PaginationQuery(BaseModel):
    """``?page=&limit=``. Unusable values fall back to the defaults."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @field_validator("page", mode="before")
    @classmethod
    def _page(cls, value: Any) -> int:
        return _positive_int_or(value, DEFAULT_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def _limit(cls, value: Any) -> int:
        return _positive_int_or(value, DEFAULT_LIMIT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class MessageResponse(BaseModel):
    message: str
