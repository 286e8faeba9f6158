"""This file contains the logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure the root logger for the service."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
