"""Logging helpers for b64codec."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a b64codec module.
    
    Records propagate to the root logger. Until the application configures
    logging, the level stays at WARNING so debug records are dropped.
    
    Args:
        name: Logger name (typically __name__)
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
