"""Data models for port status evaluation."""

from portstatus.models.indicator import UNKNOWN_INDICATOR, BlinkPattern, LedColor, StatusIndicator
from portstatus.models.snapshot import (
    PortStateSnapshot,
    StatusReport,
    StatusRow,
    TrunkStateSnapshot,
    load_report,
)
from portstatus.models.state import AdminState, HealthState, OperState, TrunkMemberBlockState

__all__ = [
    "LedColor",
    "BlinkPattern",
    "StatusIndicator",
    "UNKNOWN_INDICATOR",
    "AdminState",
    "OperState",
    "HealthState",
    "TrunkMemberBlockState",
    "PortStateSnapshot",
    "TrunkStateSnapshot",
    "StatusReport",
    "StatusRow",
    "load_report",
]
