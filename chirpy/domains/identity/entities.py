from chirpy.core.security import verify_password


class User:
    """Сущность пользователя домена Identity"""
    
    def __init__(self, id: int, email: str, password_hash: str):
        self.id = id
        self.email = email
        self.password_hash = password_hash
    
    def authenticate(self, password: str) -> None:
        """Проверка пароля пользователя, AuthenticationError при несовпадении"""
        verify_password(self.password_hash, password)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id
    
    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
