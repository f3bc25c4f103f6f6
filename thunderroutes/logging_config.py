import logging
from typing import Optional

from rich.logging import RichHandler

from thunderroutes.config import settings

# Geocoding libraries log every request at DEBUG; keep them quieter than the app.
NOISY_LOGGERS = ("geopy", "urllib3")


def configure(level: Optional[str] = None) -> None:
    """Route logs through rich at ``level``, or ``settings.LOG_LEVEL`` when omitted."""
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=logging.WARNING,
        format=settings.LOG_FORMAT,
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
    )
    logging.getLogger("thunderroutes").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
