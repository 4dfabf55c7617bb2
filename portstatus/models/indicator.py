"""LED color / blink pattern indicator model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LedColor(Enum):
    """Indicator color."""

    UNKNOWN = "unknown"
    GREEN = "green"
    AMBER = "amber"


class BlinkPattern(Enum):
    """Indicator blink pattern."""

    UNKNOWN = "unknown"
    OFF = "off"
    SOLID = "solid"
    BLINK_SLOW = "blink_slow"
    BLINK_FAST = "blink_fast"


@dataclass(frozen=True)
class StatusIndicator:
    """Immutable (color, pattern) pair."""

    color: LedColor = LedColor.UNKNOWN
    pattern: BlinkPattern = BlinkPattern.UNKNOWN

    @property
    def is_alarm(self) -> bool:
        """True for blinking amber, slow or fast."""
        return self.color is LedColor.AMBER and self.pattern in (
            BlinkPattern.BLINK_SLOW,
            BlinkPattern.BLINK_FAST,
        )


UNKNOWN_INDICATOR = StatusIndicator(LedColor.UNKNOWN, BlinkPattern.UNKNOWN)
