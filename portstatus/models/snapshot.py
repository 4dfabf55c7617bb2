"""Pydantic models for port/trunk state snapshots and evaluated status rows."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from portstatus.exceptions import SnapshotError
from portstatus.models.indicator import BlinkPattern, LedColor
from portstatus.models.state import AdminState, HealthState, OperState, TrunkMemberBlockState


class PortStateSnapshot(BaseModel):
    """The four observed states of a single physical port."""

    name: str
    admin: AdminState = AdminState.UNKNOWN
    oper: OperState = OperState.UNKNOWN
    health: HealthState = HealthState.UNKNOWN
    block: TrunkMemberBlockState = TrunkMemberBlockState.UNKNOWN


class TrunkStateSnapshot(BaseModel):
    """A trunk (LAG) and its member ports, in a stable order."""

    name: str
    members: list[PortStateSnapshot] = Field(default_factory=list)


class StatusReport(BaseModel):
    """All ports and trunks of one device."""

    ports: list[PortStateSnapshot] = Field(default_factory=list)
    trunks: list[TrunkStateSnapshot] = Field(default_factory=list)


class StatusRow(BaseModel):
    """Evaluated indicator for one port or trunk."""

    name: str
    kind: str
    color: LedColor
    pattern: BlinkPattern


def load_report(path: str | Path) -> StatusReport:
    """Read and validate a JSON snapshot file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot file: {e}", path=path) from e

    try:
        report = StatusReport.model_validate_json(text)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot file {path}: {e}", path=path) from e

    logger.info(f"Loaded {len(report.ports)} ports and {len(report.trunks)} trunks from {path}")
    return report
