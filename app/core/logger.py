# core/logger.py
import logging

from app.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("tripplanner")
logger.setLevel(settings.LOG_LEVEL.upper())

# module may be re-imported by reloaders; attach the console handler once
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the service logger, e.g. ``tripplanner.parser``."""
    return logger.getChild(name)
