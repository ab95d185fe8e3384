import logging
from dashboard.config import LOG_LEVEL

def configure_logging() -> None:
    """Configuration racine unique (format lisible, niveau via LOG_LEVEL)."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
