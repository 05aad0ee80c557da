# alertmaps/core/logger.py
from loguru import logger
import sys

from alertmaps.core.config import settings

# Configure logger format
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level: <8}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    level=settings.LOG_LEVEL,
    backtrace=True,
    diagnose=settings.ENVIRONMENT == "development",
)

__all__ = ["logger"]
