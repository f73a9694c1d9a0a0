import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from chirpy.api.http import (
    admin_router,
    auth_router,
    chirps_router,
    health_router,
    users_router,
)
from chirpy.core.config import settings
from chirpy.core.exceptions import HashingError, StorageError
from chirpy.core.logging import get_logger
from chirpy.core.metrics import fileserver_hits

logger = get_logger(__name__)

app = FastAPI(
    title="Chirpy",
    description="Сервис коротких сообщений",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def count_fileserver_hits(request: Request, call_next):
    """Подсчет обращений к файловому серверу"""
    response = await call_next(request)
    path = request.url.path
    # Редирект /app -> /app/ не считается отдельным посещением
    is_redirect = 300 <= response.status_code < 400
    if (path == "/app" or path.startswith("/app/")) and not is_redirect:
        fileserver_hits.increment()
    return response


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


@app.exception_handler(HashingError)
async def hashing_error_handler(request: Request, exc: HashingError):
    logger.error(f"Hashing error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Error hashing password"}
    )


# Файловый сервер с подсчетом посещений
if os.path.isdir(settings.filepath_root):
    app.mount("/app", StaticFiles(directory=settings.filepath_root, html=True), name="app")

app.include_router(health_router)
app.include_router(admin_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(chirps_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Chirpy API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/healthz"
    }


def run():
    import uvicorn

    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run("chirpy.main:app", host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
