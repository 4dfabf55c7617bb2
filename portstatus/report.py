"""Evaluation of a whole device snapshot into status rows."""

from __future__ import annotations

from portstatus.aggregator import aggregate_trunk
from portstatus.classifier import classify_port
from portstatus.models.snapshot import StatusReport, StatusRow


def evaluate_report(report: StatusReport) -> list[StatusRow]:
    """Return one row per standalone port followed by one row per trunk."""
    rows: list[StatusRow] = []
    for port in report.ports:
        indicator = classify_port(port)
        rows.append(StatusRow(name=port.name, kind="port", color=indicator.color, pattern=indicator.pattern))
    for trunk in report.trunks:
        indicator = aggregate_trunk(trunk)
        rows.append(StatusRow(name=trunk.name, kind="trunk", color=indicator.color, pattern=indicator.pattern))
    return rows
