"""Shared fixtures for the portstatus test suite."""

from __future__ import annotations

import json

import pytest

from portstatus.models.snapshot import PortStateSnapshot

# ── snapshot fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def port_snapshot():
    """Factory fixture returning a healthy, forwarding PortStateSnapshot."""

    def _make(**kwargs):
        defaults = {
            "name": "eth1",
            "admin": "enabled",
            "oper": "up",
            "health": "good",
            "block": "unknown",
        }
        defaults.update(kwargs)
        return PortStateSnapshot(**defaults)

    return _make


@pytest.fixture()
def snapshot_file(tmp_path):
    """Factory fixture writing a JSON snapshot file and returning its path."""

    def _make(data=None):
        if data is None:
            data = {
                "ports": [
                    {"name": "eth1", "admin": "enabled", "oper": "up", "health": "good"},
                    {"name": "eth2", "admin": "disabled", "oper": "down"},
                    {"name": "eth3", "admin": "enabled", "oper": "up", "health": "bad"},
                ],
                "trunks": [
                    {
                        "name": "po1",
                        "members": [
                            {"name": "eth4", "admin": "enabled", "oper": "up", "health": "good", "block": "forwarding"},
                            {"name": "eth5", "admin": "enabled", "oper": "up", "health": "good", "block": "forwarding"},
                        ],
                    },
                    {
                        "name": "po2",
                        "members": [
                            {"name": "eth6", "admin": "enabled", "oper": "up", "health": "good", "block": "forwarding"},
                            {"name": "eth7", "admin": "enabled", "oper": "up", "health": "bad", "block": "forwarding"},
                        ],
                    },
                ],
            }
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(data))
        return path

    return _make
