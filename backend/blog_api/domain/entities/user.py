"""Domain entity for registered users."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """A registered account. ``password_hash`` is a one-way hash, never plaintext."""

    username: str
    email: str
    password_hash: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
