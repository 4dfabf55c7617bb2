"""Port status indicator library.

Derives a single color/blink-pattern indicator for a switch port from its
admin, link, health and trunk-member block states, and folds member
indicators into one trunk-level indicator.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from portstatus.aggregator import aggregate, aggregate_trunk  # noqa: E402
from portstatus.classifier import classify, classify_port  # noqa: E402
from portstatus.exceptions import PortStatusError, SnapshotError  # noqa: E402
from portstatus.models import (  # noqa: E402
    AdminState,
    BlinkPattern,
    HealthState,
    LedColor,
    OperState,
    StatusIndicator,
    TrunkMemberBlockState,
)

__all__ = [
    "glogger",
    "configure_logging",
    "classify",
    "classify_port",
    "aggregate",
    "aggregate_trunk",
    "AdminState",
    "OperState",
    "HealthState",
    "TrunkMemberBlockState",
    "LedColor",
    "BlinkPattern",
    "StatusIndicator",
    "PortStatusError",
    "SnapshotError",
]
