from chirpy.domains.identity.entities import User
from chirpy.domains.identity.schemas import (
    UserCreate, UserLogin, UserUpdate,
    UserResponse, LoginResponse, Token
)

__all__ = [
    "User",
    "UserCreate", "UserLogin", "UserUpdate",
    "UserResponse", "LoginResponse", "Token"
]
