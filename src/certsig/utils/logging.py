import logging
import sys

from ..config import load_config


def get_logger(name: str = "certsig"):
    logger = logging.getLogger(name)
    root = logging.getLogger("certsig")
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        h.setFormatter(fmt)
        root.addHandler(h)
        root.setLevel(getattr(logging, load_config().log_level, logging.INFO))
    return logger
