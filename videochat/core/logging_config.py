import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging() -> None:
    """Configure root logging once, using LOG_LEVEL from settings."""
    level = getattr(logging, get_settings().log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # google-genai logs every HTTP request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
