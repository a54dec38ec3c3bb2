# uninits/core/logger.py
import logging
import sys

from uninits.core.config import CONFIG

# Request-scoped lines carry the scholar ID in the message, so keep the
# prefix short: time, level, area.
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_root = logging.getLogger("uninits")


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach the stdout handler once; later calls only change the level."""
    _root.setLevel((level or CONFIG.LOG_LEVEL).upper())
    if not _root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        _root.addHandler(handler)
        # uvicorn installs its own root handlers; don't print twice
        _root.propagate = False
    # The driver's command/heartbeat chatter drowns out portal lines at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    return _root


configure_logging()


def get_logger(area: str | None = None) -> logging.Logger:
    return _root.getChild(area) if area else _root
