from typing import Dict

from pydantic import BaseModel, Field


class ChirpModel(BaseModel):
    id: int
    body: str


class UserModel(BaseModel):
    id: int
    email: str
    password_hash: str


class DBStructure(BaseModel):
    """Полный снимок хранилища; ключи в JSON - id в виде строк"""
    chirps: Dict[int, ChirpModel] = Field(default_factory=dict)
    users: Dict[int, UserModel] = Field(default_factory=dict)
