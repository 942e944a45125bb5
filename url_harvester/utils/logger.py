import logging
import os
import sys

def setup_logger(name="url_harvester", level=None, stream=None):
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if not handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    elif stream is not None:
        # modules call this at import time; a later caller may redirect output
        for handler in handlers:
            handler.setStream(stream)

    return logger
