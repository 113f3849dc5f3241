import logging
import sys

from .config import settings


def setup_logging():
    """
    Set up the logging configuration for the application.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
