"""Per-port input state enums as reported by the device state store."""

from __future__ import annotations

from enum import Enum


class _StateEnum(Enum):
    """Enum looked up by value, case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> _StateEnum | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class AdminState(_StateEnum):
    """Operator-configured port mode."""

    UNKNOWN = "unknown"
    ENABLED = "enabled"
    DISABLED = "disabled"
    DIAGNOSTIC = "diagnostic"

    @property
    def is_enabled(self) -> bool:
        return self is AdminState.ENABLED


class OperState(_StateEnum):
    """Observed link state."""

    UNKNOWN = "unknown"
    UP = "up"
    DOWN = "down"
    FAILED = "failed"


class HealthState(_StateEnum):
    """Result of a higher-level port diagnostic, e.g. a neighbor check."""

    UNKNOWN = "unknown"
    GOOD = "good"
    BAD = "bad"


class TrunkMemberBlockState(_StateEnum):
    """Forwarding state of a trunk member.

    Standalone ports use ``UNKNOWN``.
    """

    UNKNOWN = "unknown"
    FORWARDING = "forwarding"
    BLOCKED = "blocked"

    @property
    def is_forwarding(self) -> bool:
        return self is TrunkMemberBlockState.FORWARDING
