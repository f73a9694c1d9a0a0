from chirpy.api.http.health import router as health_router
from chirpy.api.http.admin import router as admin_router
from chirpy.api.http.auth import router as auth_router
from chirpy.api.http.users import router as users_router
from chirpy.api.http.chirps import router as chirps_router

__all__ = [
    "health_router",
    "admin_router",
    "auth_router", 
    "users_router",
    "chirps_router"
]
