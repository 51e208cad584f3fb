"""Ports for credential issuance and password hashing."""

from abc import ABC, abstractmethod


class TokenService(ABC):
    """Issues and verifies signed bearer credentials."""

    @abstractmethod
    def issue(self, user_id: int) -> str:
        """Return a signed token encoding ``user_id`` and a fixed expiry."""
        ...

    @abstractmethod
    def verify(self, token: str) -> int:
        """Return the user ID encoded in ``token``.

        Raises UnauthenticatedError if the signature, expiry or payload is invalid.
        """
        ...


class PasswordHasher(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        ...

    @abstractmethod
    def dummy_verify(self) -> None:
        """Spend the same effort as ``verify`` without a stored hash."""
        ...
