"""Tests for the portstatus package surface."""

import portstatus


class TestPackage:
    """Test top-level exports."""

    def test_version(self):
        """Package exposes a version string."""
        assert isinstance(portstatus.__version__, str)

    def test_exports(self):
        """Core operations and models are importable from the package."""
        for name in portstatus.__all__:
            assert hasattr(portstatus, name)

    def test_classify_then_aggregate(self):
        """Top-level classify/aggregate work together."""
        healthy = portstatus.classify(
            portstatus.AdminState.ENABLED,
            portstatus.OperState.UP,
            portstatus.HealthState.GOOD,
            portstatus.TrunkMemberBlockState.FORWARDING,
        )
        assert portstatus.aggregate([healthy, healthy]) == healthy
