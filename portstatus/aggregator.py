"""Folding of member port indicators into one trunk-level indicator."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from portstatus.classifier import classify_port
from portstatus.models.indicator import UNKNOWN_INDICATOR, BlinkPattern, LedColor, StatusIndicator
from portstatus.models.snapshot import TrunkStateSnapshot

CONFLICT = StatusIndicator(LedColor.AMBER, BlinkPattern.SOLID)
CONFLICT_WITH_ALARM = StatusIndicator(LedColor.AMBER, BlinkPattern.BLINK_SLOW)


def _merge(current: StatusIndicator, other: StatusIndicator) -> StatusIndicator:
    if current == other:
        return current
    # A mismatch never hides a blinking amber alarm on either side.
    if current.is_alarm or other.is_alarm:
        return CONFLICT_WITH_ALARM
    return CONFLICT


def aggregate(indicators: Iterable[StatusIndicator]) -> StatusIndicator:
    """Fold indicators left to right into a single indicator.

    Identical indicators collapse to themselves. Any mismatch turns the
    result amber: blinking slow if either side of the mismatch is a blinking
    amber alarm, solid otherwise. Each element is compared with the result
    merged so far, not with the first element.

    An empty input yields ``(UNKNOWN, UNKNOWN)``.
    """
    it = iter(indicators)
    result = next(it, None)
    if result is None:
        return UNKNOWN_INDICATOR

    for indicator in it:
        result = _merge(result, indicator)
    return result


def aggregate_trunk(trunk: TrunkStateSnapshot) -> StatusIndicator:
    """Classify each member of a trunk in order and aggregate the results."""
    result = aggregate(classify_port(member) for member in trunk.members)
    logger.debug(f"{trunk.name}: {len(trunk.members)} members -> {result.color.value}/{result.pattern.value}")
    return result
