import threading
from typing import Optional

from chirpy.db.database import Database
from chirpy.core.config import settings

# Один экземпляр хранилища на процесс: блокировка живет в нем
_database: Optional[Database] = None
_database_lock = threading.Lock()


def get_db() -> Database:
    global _database
    if _database is None:
        with _database_lock:
            if _database is None:
                _database = Database(settings.database_path)
    return _database
