from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class Settings(BaseSettings):
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # Срок жизни токенов
    access_token_expire_seconds: int = 24 * 60 * 60
    refresh_token_expire_days: int = 60

    database_path: str = "database.json"
    bcrypt_rounds: int = 12

    max_chirp_length: int = 140
    banned_words: List[str] = ["kerfuffle", "sharbert", "fornax"]

    filepath_root: str = str(STATIC_DIR)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
