import logging
import sys


LOGGER_LEVEL = {
    0: logging.NOTSET,
    1: logging.INFO,
    2: logging.DEBUG,
}

LOGGER_FORMAT = '%(levelname)-8s %(asctime)-12s %(message)s'
LOGGER_DATEFMT = '%H:%M:%S'

logger = logging.getLogger('dheap')


def setup_logging(verbosity: int) -> None:
    """Send log records to stdout and set the package level from verbosity."""
    logging.basicConfig(
        format=LOGGER_FORMAT,
        datefmt=LOGGER_DATEFMT,
        stream=sys.stdout
    )
    logger.setLevel(LOGGER_LEVEL[verbosity])
