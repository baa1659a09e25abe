"""Log output for the forcegraph CLI. The library itself only creates loggers."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route `forcegraph.*` records to stderr and, if given, to `log_file`.

    Calling it again replaces the handlers installed by the previous call.
    stdout stays free for the CLI tables.
    """
    root = logging.getLogger("forcegraph")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.debug("Log level set to %s", logging.getLevelName(level))
    return root
