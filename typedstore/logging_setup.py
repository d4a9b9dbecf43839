import logging
import os
from typing import Optional, Union


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Send log records to stderr. Does nothing if the root logger is already set up."""
    root = logging.getLogger()
    if root.handlers:
        return root

    if level is None:
        level = os.getenv("TYPEDSTORE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(sh)
    return root
