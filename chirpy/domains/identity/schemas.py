from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class UserCreate(BaseModel):
    """Схема для создания пользователя"""
    email: EmailStr
    password: str


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    email: EmailStr
    password: str
    expires_in_seconds: Optional[int] = None


class UserUpdate(BaseModel):
    """Схема для обновления пользователя"""
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(UserResponse):
    token: str
    refresh_token: str


class Token(BaseModel):
    """Схема для нового access токена"""
    token: str
