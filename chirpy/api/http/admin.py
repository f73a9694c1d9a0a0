from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy.core.metrics import fileserver_hits

router = APIRouter(prefix="/api", tags=["admin"])

METRICS_TEMPLATE = (
    "<html><body>"
    "<h1>Welcome, Chirpy Admin</h1>"
    "<p>Chirpy has been visited {hits} times!</p>"
    "</body></html>"
)


@router.get("/metrics", response_class=HTMLResponse)
async def metrics():
    """Страница администратора со счетчиком посещений"""
    return METRICS_TEMPLATE.format(hits=fileserver_hits.value)


@router.get("/reset", response_class=PlainTextResponse)
async def reset_metrics():
    """Сброс счетчика посещений"""
    fileserver_hits.reset()
    return "OK"
