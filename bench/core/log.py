import logging

from bench.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Route the diagnostic log to stderr using the configured format."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=settings.log_format)
