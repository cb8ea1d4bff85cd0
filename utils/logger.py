import logging
from typing import Optional

from config import Config


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'

#-- function to initialize a logger that writes to the console, or to a file when LOG_FILE is set
def setup_logger(name: str, log_file: Optional[str] = None, level=None):
    log_file = log_file if log_file is not None else Config.LOG_FILE
    level = level if level is not None else Config.LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # handler is only opened the first time a logger is set up
    if not logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
