"""Port status classification.

Maps the admin, link, health and trunk-member block state of one port to a
single :class:`StatusIndicator`. Rules are checked in priority order and the
first one that matches decides the indicator:

====  ==========================  ======================
 #    condition                   indicator
====  ==========================  ======================
 1    admin not enabled           amber, solid
 2    link not up                 green, off
 3    trunk member blocked        green, blink slow
 4    health good                 green, solid
 5    health bad                  amber, blink fast
 6    health unknown              green, blink fast
====  ==========================  ======================
"""

from __future__ import annotations

from typing import assert_never

from loguru import logger

from portstatus.models.indicator import BlinkPattern, LedColor, StatusIndicator
from portstatus.models.snapshot import PortStateSnapshot
from portstatus.models.state import AdminState, HealthState, OperState, TrunkMemberBlockState

ADMIN_OVERRIDE = StatusIndicator(LedColor.AMBER, BlinkPattern.SOLID)
LINK_DOWN = StatusIndicator(LedColor.GREEN, BlinkPattern.OFF)
MEMBER_BLOCKED = StatusIndicator(LedColor.GREEN, BlinkPattern.BLINK_SLOW)
HEALTHY = StatusIndicator(LedColor.GREEN, BlinkPattern.SOLID)
UNHEALTHY = StatusIndicator(LedColor.AMBER, BlinkPattern.BLINK_FAST)
HEALTH_PENDING = StatusIndicator(LedColor.GREEN, BlinkPattern.BLINK_FAST)


def classify(
    admin: AdminState,
    oper: OperState,
    health: HealthState,
    block: TrunkMemberBlockState = TrunkMemberBlockState.UNKNOWN,
) -> StatusIndicator:
    """Return the indicator for a port in the given states."""
    if admin is not AdminState.ENABLED:
        # Disabled and diagnostic both override everything else.
        return ADMIN_OVERRIDE
    if oper is not OperState.UP:
        return LINK_DOWN
    if block is TrunkMemberBlockState.BLOCKED:
        return MEMBER_BLOCKED

    match health:
        case HealthState.GOOD:
            return HEALTHY
        case HealthState.BAD:
            return UNHEALTHY
        case HealthState.UNKNOWN:
            return HEALTH_PENDING
        case _:
            assert_never(health)


def classify_port(snapshot: PortStateSnapshot) -> StatusIndicator:
    """Classify a port from its state snapshot."""
    indicator = classify(snapshot.admin, snapshot.oper, snapshot.health, snapshot.block)
    logger.debug(
        f"{snapshot.name}: admin={snapshot.admin.value} oper={snapshot.oper.value} "
        f"health={snapshot.health.value} block={snapshot.block.value} "
        f"-> {indicator.color.value}/{indicator.pattern.value}"
    )
    return indicator
