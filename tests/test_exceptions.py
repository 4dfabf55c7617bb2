"""Tests for portstatus exception hierarchy."""

from pathlib import Path

from portstatus.exceptions import PortStatusError, SnapshotError


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_port_status_error_inherits_from_exception(self):
        """PortStatusError should inherit from Exception."""
        assert issubclass(PortStatusError, Exception)
        exc = PortStatusError("test")
        assert str(exc) == "test"

    def test_snapshot_error_inherits_from_port_status_error(self):
        """SnapshotError should inherit from PortStatusError."""
        assert issubclass(SnapshotError, PortStatusError)
        exc = SnapshotError("bad file")
        assert isinstance(exc, PortStatusError)
        assert str(exc) == "bad file"
        assert exc.path is None

    def test_snapshot_error_with_path(self):
        """SnapshotError keeps the offending path."""
        exc = SnapshotError("bad file", path=Path("/tmp/x.json"))
        assert exc.path == Path("/tmp/x.json")
