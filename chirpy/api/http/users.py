from fastapi import APIRouter, Depends, HTTPException, status

from chirpy.core.auth import get_current_user_id
from chirpy.core.db import get_db
from chirpy.core.exceptions import NotFoundError
from chirpy.db.database import Database
from chirpy.domains.identity.schemas import UserCreate, UserResponse, UserUpdate
from chirpy.domains.identity.services import IdentityService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Database = Depends(get_db)
):
    """Регистрация нового пользователя"""
    identity_service = IdentityService(db)
    
    user = identity_service.register_user(user_data.email, user_data.password)
    
    return UserResponse.model_validate(user)


@router.put("", response_model=UserResponse)
def update_user(
    update_data: UserUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Database = Depends(get_db)
):
    """Обновление email и пароля текущего пользователя"""
    identity_service = IdentityService(db)
    
    try:
        user = identity_service.update_user(user_id, update_data.email, update_data.password)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    
    return UserResponse.model_validate(user)
