import logging

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int | None = None) -> None:
    logging.basicConfig(
        level=level or settings.log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
