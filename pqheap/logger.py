import logging
import os
import sys

_FORMAT = "%(levelname)s %(asctime)s %(name)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_root_logger = logging.getLogger("pqheap")
_root_logger.addHandler(logging.NullHandler())
_default_handler = None


def _setup_logger(level=None):
    """Attach a stdout handler when a logging level is requested."""
    global _default_handler
    if not level:
        return
    _root_logger.setLevel(level.upper())
    if _default_handler is None:
        _default_handler = logging.StreamHandler(sys.stdout)
        _default_handler.setFormatter(
            logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
        )
        _root_logger.addHandler(_default_handler)


_setup_logger(os.getenv("PQHEAP_LOGGING_LEVEL"))


def init_logger(name: str) -> logging.Logger:
    """Return a logger under the package root logger."""
    return logging.getLogger(name)
