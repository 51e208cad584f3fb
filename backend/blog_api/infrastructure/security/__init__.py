from .jwt_token_service import JWTTokenService
from .password_hasher import BcryptPasswordHasher

__all__ = [
    "JWTTokenService",
    "BcryptPasswordHasher",
]
