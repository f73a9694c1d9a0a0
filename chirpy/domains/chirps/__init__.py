from chirpy.domains.chirps.entities import Chirp
from chirpy.domains.chirps.schemas import ChirpCreate, ChirpResponse, ChirpValidateResponse

__all__ = [
    "Chirp",
    "ChirpCreate", "ChirpResponse", "ChirpValidateResponse"
]
