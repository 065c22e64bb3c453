"""Console logging for services embedding the resolver"""
import logging
import sys


LOG_FORMAT  = "[%(asctime)s] %(levelname)-8s %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(
        level: int = logging.INFO,
        logger_name: str = "date_context" ) -> logging.Logger:

    """Attach a single stdout handler to the package logger."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()

    console_h = logging.StreamHandler(sys.stdout)
    console_h.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_h)

    return logger
