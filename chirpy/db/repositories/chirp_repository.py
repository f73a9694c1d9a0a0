import re
from typing import List, Union

from chirpy.core.exceptions import InvalidArgumentError, NotFoundError
from chirpy.db.database import Database
from chirpy.db.models import ChirpModel
from chirpy.domains.chirps.entities import Chirp

DECIMAL_ID = re.compile(r"[0-9]+")


class ChirpRepository:
    """Репозиторий для работы с chirp'ами"""
    
    def __init__(self, db: Database):
        self.db = db
    
    def create(self, body: str) -> Chirp:
        """Создание нового chirp'а"""
        with self.db.transaction() as structure:
            chirp_id = len(structure.chirps) + 1
            db_chirp = ChirpModel(id=chirp_id, body=body)
            structure.chirps[chirp_id] = db_chirp
        
        return self._to_domain(db_chirp)
    
    def get_all(self) -> List[Chirp]:
        """Все chirp'ы по возрастанию id"""
        with self.db.snapshot() as structure:
            db_chirps = sorted(structure.chirps.values(), key=lambda c: c.id)
        
        return [self._to_domain(chirp) for chirp in db_chirps]
    
    def get_by_id(self, chirp_id: Union[str, int]) -> Chirp:
        """Получение chirp'а по id"""
        parsed_id = self._parse_id(chirp_id)
        
        with self.db.snapshot() as structure:
            db_chirp = structure.chirps.get(parsed_id)
        
        if db_chirp is None:
            raise NotFoundError(f"Chirp {parsed_id} does not exist")
        
        return self._to_domain(db_chirp)
    
    @staticmethod
    def _parse_id(chirp_id: Union[str, int]) -> int:
        # Только десятичные цифры ASCII: int() принимает еще "1_0", " 3 " и т.п.
        if not isinstance(chirp_id, int) and not (
            isinstance(chirp_id, str) and DECIMAL_ID.fullmatch(chirp_id)
        ):
            raise InvalidArgumentError(f"Invalid chirp id: {chirp_id!r}")
        
        try:
            parsed_id = int(chirp_id)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid chirp id: {chirp_id!r}")
        
        if parsed_id < 1:
            raise InvalidArgumentError(f"Invalid chirp id: {chirp_id!r}")
        
        return parsed_id
    
    def _to_domain(self, db_chirp: ChirpModel) -> Chirp:
        """Преобразование модели хранилища в доменную сущность"""
        return Chirp(id=db_chirp.id, body=db_chirp.body)
