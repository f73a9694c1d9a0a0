from typing import List, Union

from chirpy.core.config import settings
from chirpy.core.exceptions import InvalidArgumentError
from chirpy.core.logging import get_logger
from chirpy.db.database import Database
from chirpy.db.repositories.chirp_repository import ChirpRepository
from chirpy.domains.chirps.entities import Chirp

logger = get_logger(__name__)


class ChirpService:
    """Сервис для работы с chirp'ами"""
    
    def __init__(self, db: Database):
        self.db = db
        self.chirp_repository = ChirpRepository(db)
    
    @staticmethod
    def validate_chirp(body: str) -> str:
        """Проверка длины и очистка текста от запрещенных слов"""
        if len(body) > settings.max_chirp_length:
            raise InvalidArgumentError("Chirp is too long")
        
        return Chirp.clean_body(body, settings.banned_words)
    
    def create_chirp(self, body: str) -> Chirp:
        """Создание нового chirp'а"""
        cleaned_body = self.validate_chirp(body)
        chirp = self.chirp_repository.create(cleaned_body)
        logger.info("Created chirp %d", chirp.id)
        return chirp
    
    def list_chirps(self) -> List[Chirp]:
        return self.chirp_repository.get_all()
    
    def get_chirp(self, chirp_id: Union[str, int]) -> Chirp:
        return self.chirp_repository.get_by_id(chirp_id)
