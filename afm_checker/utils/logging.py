import logging
import os

logger = logging.getLogger('afm_checker')
if not logger.handlers:
    handler = logging.StreamHandler()
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s')
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    logger.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())


def get_logger(level: str = None):
    if level:
        logger.setLevel(level.upper())
    return logger
