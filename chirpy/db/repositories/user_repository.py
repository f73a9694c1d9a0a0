from chirpy.core.exceptions import NotFoundError
from chirpy.core.security import get_password_hash
from chirpy.db.database import Database
from chirpy.db.models import UserModel
from chirpy.domains.identity.entities import User


class UserRepository:
    """Репозиторий для работы с пользователями"""
    
    def __init__(self, db: Database):
        self.db = db
    
    def create(self, email: str, password: str) -> User:
        """Создание нового пользователя.

        Уникальность email не проверяется.
        """
        # bcrypt медленный, хешируем до захвата блокировки
        password_hash = get_password_hash(password)
        
        with self.db.transaction() as structure:
            user_id = len(structure.users) + 1
            db_user = UserModel(id=user_id, email=email, password_hash=password_hash)
            structure.users[user_id] = db_user
        
        return self._to_domain(db_user)
    
    def get_by_email(self, email: str) -> User:
        """Получение первого пользователя с данным email"""
        with self.db.snapshot() as structure:
            for db_user in structure.users.values():
                if db_user.email == email:
                    return self._to_domain(db_user)
        
        raise NotFoundError(f"User {email} does not exist")
    
    def update(self, user_id: int, email: str, password_hash: str) -> User:
        """Обновление email и хеша пароля"""
        with self.db.transaction() as structure:
            db_user = structure.users.get(user_id)
            if db_user is None:
                raise NotFoundError(f"User {user_id} does not exist")
            
            db_user.email = email
            db_user.password_hash = password_hash
        
        return self._to_domain(db_user)
    
    def _to_domain(self, db_user: UserModel) -> User:
        """Преобразование модели хранилища в доменную сущность"""
        return User(
            id=db_user.id,
            email=db_user.email,
            password_hash=db_user.password_hash
        )
