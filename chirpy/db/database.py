from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from pydantic import ValidationError

from chirpy.core.exceptions import SerializationError, StorageIOError
from chirpy.core.locks import ReadWriteLock
from chirpy.core.logging import get_logger
from chirpy.db.models import DBStructure

logger = get_logger(__name__)


class Database:
    """Хранилище в одном JSON файле.

    Каждое чтение загружает весь снимок, каждая запись переписывает файл
    целиком. Все операции одного процесса сериализуются одной
    блокировкой чтения/записи на весь снимок: операции чтения идут
    параллельно, цикл чтение-изменение-запись выполняется монопольно.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = ReadWriteLock()
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Создание пустого снимка, если файла еще нет"""
        with self._lock.write_lock():
            if not self.path.exists():
                logger.info("Creating database file %s", self.path)
                self._write(DBStructure())

    def _load(self) -> DBStructure:
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"Could not read {self.path}: {e}") from e

        try:
            return DBStructure.model_validate_json(data)
        except ValidationError as e:
            raise SerializationError(f"Malformed database file {self.path}") from e

    def _write(self, structure: DBStructure) -> None:
        data = structure.model_dump_json()
        try:
            self.path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Could not write {self.path}: {e}") from e

    def load_db(self) -> DBStructure:
        """Загрузка всего снимка"""
        with self._lock.read_lock():
            return self._load()

    def write_db(self, structure: DBStructure) -> None:
        """Перезапись всего снимка"""
        with self._lock.write_lock():
            self._write(structure)

    @contextmanager
    def snapshot(self) -> Iterator[DBStructure]:
        """Снимок для чтения; запись на это время заблокирована"""
        with self._lock.read_lock():
            yield self._load()

    @contextmanager
    def transaction(self) -> Iterator[DBStructure]:
        """Монопольный цикл загрузка -> изменение -> запись.

        Если тело блока завершилось исключением, файл не перезаписывается.
        """
        with self._lock.write_lock():
            structure = self._load()
            yield structure
            self._write(structure)
