"""
Logging setup for the service.
"""
import logging
import sys

from translation_service.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str | None = None) -> None:
    """
    Configure root logger once.
    Safe to call multiple times - existing handlers are replaced.
    """
    log_level = (level or settings.LOG_LEVEL).upper()
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)
    
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
