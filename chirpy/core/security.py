from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from chirpy.core.config import settings
from chirpy.core.exceptions import AuthenticationError, HashingError, UnauthorizedError

ACCESS_TOKEN_ISSUER = "access"
REFRESH_TOKEN_ISSUER = "refresh"

# bcrypt учитывает только первые 72 байта пароля
BCRYPT_MAX_PASSWORD_BYTES = 72

# Контекст для хеширования паролей
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def get_password_hash(password: str) -> str:
    """Хеширование пароля"""
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise HashingError("Password is longer than 72 bytes")

    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError) as e:
        raise HashingError(str(e)) from e


def verify_password(hashed_password: str, plain_password: str) -> None:
    """Проверка пароля, AuthenticationError при несовпадении"""
    try:
        matches = pwd_context.verify(plain_password, hashed_password)
    except (TypeError, ValueError) as e:
        # Хеш не распознан passlib
        raise AuthenticationError("Invalid credentials") from e

    if not matches:
        raise AuthenticationError("Invalid credentials")


def issue_token(issuer: str, subject: int, secret: str, expires_delta: timedelta) -> str:
    """Создание подписанного JWT с назначением issuer для пользователя subject"""
    now = datetime.now(timezone.utc)
    to_encode = {
        "iss": issuer,
        "sub": str(subject),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, secret, algorithm=settings.jwt_algorithm)


def _decode(token: str, secret: str, issuer: Optional[str] = None) -> str:
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.jwt_algorithm],
            issuer=issuer,
        )
    except JWTError as e:
        raise UnauthorizedError("Invalid token") from e

    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedError("Token has no subject")

    return subject


def validate_token(token: str, secret: str) -> str:
    """Проверка подписи и срока действия токена, возвращает subject.

    Назначение токена (issuer) здесь не проверяется.
    """
    return _decode(token, secret)


def validate_access_token(token: str, secret: str) -> str:
    """Проверка access токена"""
    return _decode(token, secret, issuer=ACCESS_TOKEN_ISSUER)


def validate_refresh_token(token: str, secret: str) -> str:
    """Проверка refresh токена: принимается только issuer == "refresh" """
    return _decode(token, secret, issuer=REFRESH_TOKEN_ISSUER)


def create_access_token(user_id: int, expires_in_seconds: Optional[int] = None) -> str:
    """Создание JWT токена доступа.

    Клиент может только сократить срок жизни токена, но не продлить его.
    """
    expires = settings.access_token_expire_seconds
    if expires_in_seconds and 0 < expires_in_seconds < expires:
        expires = expires_in_seconds

    return issue_token(
        ACCESS_TOKEN_ISSUER,
        user_id,
        settings.jwt_secret,
        timedelta(seconds=expires),
    )


def create_refresh_token(user_id: int) -> str:
    """Создание refresh токена"""
    return issue_token(
        REFRESH_TOKEN_ISSUER,
        user_id,
        settings.jwt_secret,
        timedelta(days=settings.refresh_token_expire_days),
    )


def extract_token_from_header(authorization: str) -> Optional[str]:
    """Извлечение токена из заголовка Authorization"""
    if not authorization:
        return None
    
    parts = authorization.split()
    
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    
    return parts[1]
