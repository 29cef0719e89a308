import logging
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for the service and the CLI. Safe to call twice;
    the level is applied every time, the handler only once."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
