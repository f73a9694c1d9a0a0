from chirpy.db.database import Database
from chirpy.db.models import ChirpModel, DBStructure, UserModel

__all__ = [
    "Database",
    "DBStructure",
    "ChirpModel",
    "UserModel"
]
