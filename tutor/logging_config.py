"""
Logging for the 'tutor' namespace. Records go to stderr, leaving stdout to
the tutorial transcript.
"""
import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger("tutor")
    logger.setLevel(level)

    # main() may run more than once in a process; keep a single handler
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
