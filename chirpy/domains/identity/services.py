from typing import Optional, Tuple

from chirpy.core.config import settings
from chirpy.core.exceptions import AuthenticationError, NotFoundError
from chirpy.core.logging import get_logger
from chirpy.core.security import (
    create_access_token,
    create_refresh_token,
    get_password_hash,
    validate_refresh_token,
)
from chirpy.db.database import Database
from chirpy.db.repositories.user_repository import UserRepository
from chirpy.domains.identity.entities import User

logger = get_logger(__name__)


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""
    
    def __init__(self, db: Database):
        self.db = db
        self.user_repository = UserRepository(db)
    
    def register_user(self, email: str, password: str) -> User:
        """Регистрация нового пользователя"""
        user = self.user_repository.create(email, password)
        logger.info("Registered user %d", user.id)
        return user
    
    def authenticate_user(self, email: str, password: str) -> User:
        """Аутентификация пользователя"""
        try:
            user = self.user_repository.get_by_email(email)
        except NotFoundError:
            raise AuthenticationError("Invalid credentials")
        
        user.authenticate(password)
        return user
    
    def login_user(
        self,
        email: str,
        password: str,
        expires_in_seconds: Optional[int] = None
    ) -> Tuple[User, str, str]:
        """Вход пользователя: access и refresh токены"""
        try:
            user = self.authenticate_user(email, password)
        except AuthenticationError:
            logger.warning("Failed login attempt for %s", email)
            raise
        
        access_token = create_access_token(user.id, expires_in_seconds)
        refresh_token = create_refresh_token(user.id)
        
        return user, access_token, refresh_token
    
    def update_user(self, user_id: int, email: str, password: str) -> User:
        """Смена email и пароля.

        Уже выданные токены остаются действительными до истечения срока.
        """
        password_hash = get_password_hash(password)
        return self.user_repository.update(user_id, email, password_hash)
    
    def refresh_access_token(self, refresh_token: str) -> str:
        """Новый access токен по refresh токену"""
        subject = validate_refresh_token(refresh_token, settings.jwt_secret)
        return create_access_token(int(subject))
