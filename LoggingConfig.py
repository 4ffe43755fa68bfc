import logging
import sys

from Constants import GlobalConstants

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level=logging.WARNING, log_file=None):
    # Configures the package logger; every module logger is a child of it
    logger = logging.getLogger(GlobalConstants.LOGGER_NAME)
    logger.setLevel(level)
    # Starting a second session must not leave the first session's handlers attached
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.debug("Logging to %s", log_file or "stderr")
    return logger


def get_logger(module_name):
    return logging.getLogger(GlobalConstants.LOGGER_NAME + "." + module_name)
