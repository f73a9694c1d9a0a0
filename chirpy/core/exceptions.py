class ChirpyError(Exception):
    """Базовая ошибка приложения"""


class StorageError(ChirpyError):
    """Ошибка файлового хранилища"""


class StorageIOError(StorageError):
    """Файл хранилища не читается или не записывается"""


class SerializationError(StorageError):
    """Содержимое файла не является корректным снимком хранилища"""


class NotFoundError(ChirpyError):
    """Запись не найдена"""


class InvalidArgumentError(ChirpyError):
    """Некорректный аргумент (например, идентификатор)"""


class AuthenticationError(ChirpyError):
    """Пароль не совпадает с хешем"""


class UnauthorizedError(ChirpyError):
    """Токен отсутствует, подделан или просрочен"""


class HashingError(ChirpyError):
    """Не удалось захешировать пароль"""
