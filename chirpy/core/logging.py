import logging
import sys

from chirpy.core.config import settings

logger = logging.getLogger("chirpy")
logger.setLevel(settings.log_level.upper())

# Не дублируем сообщения через root-логгер uvicorn
logger.propagate = False

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Дочерний логгер приложения"""
    if not name.startswith("chirpy"):
        name = f"chirpy.{name}"
    return logging.getLogger(name)
