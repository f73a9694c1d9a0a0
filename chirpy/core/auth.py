from typing import Optional

from fastapi import Header, HTTPException, status

from chirpy.core.config import settings
from chirpy.core.exceptions import UnauthorizedError
from chirpy.core.security import (
    extract_token_from_header,
    validate_access_token,
)


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """Зависимость: bearer токен из заголовка Authorization"""
    token = extract_token_from_header(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


def get_current_user_id(authorization: Optional[str] = Header(None)) -> int:
    """Зависимость: id пользователя из access токена"""
    token = get_bearer_token(authorization)

    try:
        subject = validate_access_token(token, settings.jwt_secret)
        return int(subject)
    except (UnauthorizedError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
