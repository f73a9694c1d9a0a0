from fastapi import APIRouter, Depends, HTTPException, status

from chirpy.core.auth import get_bearer_token
from chirpy.core.db import get_db
from chirpy.core.exceptions import AuthenticationError, UnauthorizedError
from chirpy.db.database import Database
from chirpy.domains.identity.schemas import LoginResponse, Token, UserLogin
from chirpy.domains.identity.services import IdentityService

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    login_data: UserLogin,
    db: Database = Depends(get_db)
):
    """Вход пользователя"""
    identity_service = IdentityService(db)
    
    try:
        user, token, refresh_token = identity_service.login_user(
            login_data.email,
            login_data.password,
            login_data.expires_in_seconds
        )
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return LoginResponse(
        id=user.id,
        email=user.email,
        token=token,
        refresh_token=refresh_token
    )


@router.post("/refresh", response_model=Token)
def refresh_token(
    token: str = Depends(get_bearer_token),
    db: Database = Depends(get_db)
):
    """Обновление access токена по refresh токену"""
    identity_service = IdentityService(db)
    
    try:
        new_token = identity_service.refresh_access_token(token)
    except UnauthorizedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return Token(token=new_token)
