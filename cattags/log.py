"""Logging setup for the service process"""

import logging
import logging.config
from os import environ

from yaml import safe_load

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_FORMAT = "%(asctime)s   %(name)-30s %(levelname)-8s %(message)s"


def configure_logging() -> None:
    """Configure logging from environment variables.

    LOG_CONFIG points to a YAML file in logging dictConfig format and wins over
    everything else. Without it LOG_LEVEL, LOG_FORMAT and LOG_FILE are used.
    """
    log_config_path = environ.get("LOG_CONFIG", None)
    if log_config_path is not None:
        with open(log_config_path, "r") as f:
            logging.config.dictConfig(safe_load(f.read()))
        return

    log_level = environ.get("LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {log_level}")
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file := environ.get("LOG_FILE", None):
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=environ.get("LOG_FORMAT", DEFAULT_FORMAT),
        handlers=handlers,
    )
    # connection pool chatter hides the upstream request log lines
    if log_level != "DEBUG":
        logging.getLogger("urllib3").setLevel(logging.WARNING)
