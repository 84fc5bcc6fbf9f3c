"""
Shared helpers: logger factory and fixed-point rounding.
"""
from decimal import Decimal, ROUND_HALF_UP
import logging
import sys

from cardiorisk.config import settings

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger("cardiorisk")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the shared cardiorisk handler."""
    _configure_root()
    return logging.getLogger(name)


def round_half_up(value: float, places: int) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Operates on the exact binary value of the float, so 24.224999... stays
    24.22 while a true tie such as 0.125 becomes 0.13.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
