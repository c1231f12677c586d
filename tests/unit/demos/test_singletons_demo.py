"""Unit tests for the singleton demo."""

import pytest

from pattern_kit.demos.singletons import AppLogger, CountingFactory, run_demo


class TestSingletonsDemo:
    """Tests for run_demo."""

    def test_run_demo(self, fast_demo_env):
        """Test every strategy reports one instance built once."""
        lines = run_demo()

        assert len(lines) == 4
        for strategy, line in zip(["double_checked", "locked", "eager"], lines):
            assert line.startswith(f"{strategy}: 8 threads -> 1 instance(s), 0 failure(s)")
            assert line.endswith("constructions=1")
        assert lines[-1] == "AppLogger instances identical: True"

    def test_explicit_threads(self, fast_demo_env):
        """Test thread count argument overrides config."""
        lines = run_demo(threads=3)
        assert lines[0].startswith("double_checked: 3 threads")

    def test_zero_threads_rejected(self, fast_demo_env):
        """Test an explicit zero is not replaced by the configured count."""
        with pytest.raises(ValueError, match="threads must be >= 1"):
            run_demo(threads=0)


class TestAppLogger:
    def test_log(self):
        logger = AppLogger.get_instance()
        logger.log("first")
        AppLogger.get_instance().log("second")
        assert logger.messages == ["first", "second"]


class TestCountingFactory:
    def test_counts_calls(self):
        factory = CountingFactory()
        assert factory() is not factory()
        assert factory.calls == 2
