from pydantic import BaseModel, ConfigDict


class ChirpCreate(BaseModel):
    """Схема для создания chirp'а"""
    body: str


class ChirpResponse(BaseModel):
    """Схема для ответа с chirp'ом"""
    id: int
    body: str

    model_config = ConfigDict(from_attributes=True)


class ChirpValidateResponse(BaseModel):
    cleaned_body: str
