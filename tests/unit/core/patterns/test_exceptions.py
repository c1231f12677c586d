"""Unit tests for pattern exceptions."""

from pattern_kit.core.patterns.exceptions import (
    ConstructionError,
    DirectConstructionError,
    PatternError,
    UnknownVariantError,
)


class TestExceptions:
    """Tests for exception messages and details."""

    def test_pattern_error_defaults(self):
        """Test base error keeps message and empty details."""
        error = PatternError("something broke")
        assert error.message == "something broke"
        assert error.details == {}
        assert str(error) == "something broke"

    def test_construction_error(self):
        """Test ConstructionError message and details."""
        error = ConstructionError("settings", "missing key", attempt=2)

        assert isinstance(error, PatternError)
        assert error.message == "Failed to construct singleton 'settings': missing key"
        assert error.details == {"name": "settings", "reason": "missing key", "attempt": 2}

    def test_direct_construction_error(self):
        """Test DirectConstructionError is a TypeError."""
        error = DirectConstructionError("Settings")

        assert isinstance(error, TypeError)
        assert "Settings.get_instance()" in error.message

    def test_unknown_variant_error_sorts_choices(self):
        """Test UnknownVariantError lists sorted choices."""
        error = UnknownVariantError("shape", "hexagon", ["square", "circle"])

        assert isinstance(error, ValueError)
        assert error.choices == ["circle", "square"]
        assert error.message == "Unknown shape 'hexagon'. Valid options: circle, square"
