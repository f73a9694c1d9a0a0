from chirpy.db.repositories.chirp_repository import ChirpRepository
from chirpy.db.repositories.user_repository import UserRepository

__all__ = [
    "ChirpRepository",
    "UserRepository"
]
