"""
Tests for the Result[P] envelope and the section Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
    - Timer sections, accumulation and misuse errors
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinsys.core.result import Result
from pylinsys.core.timing import Timer


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "gaussian_elimination", "row_swaps": 1},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss",
        )
        assert result.params.value == 42.0
        assert result.info["row_swaps"] == 1
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss"

    def test_timing_none(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu_cg")
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu_cg")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestResultWarnings:

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu_cg",
            warnings=("conjugate gradient did not converge: ||r|| = 0.5",),
        )
        assert result.has_warning("did not converge")
        assert not result.has_warning("singular")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_reported(self):
        timer = Timer()
        timer.start()
        with timer.section("eliminate"):
            pass
        with timer.section("back_substitute"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "eliminate", "back_substitute"}
        assert result["total_seconds"] >= 0.0

    def test_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section("iterate"):
            pass
        first = timer._sections["iterate"]
        with timer.section("iterate"):
            pass
        timer.stop()
        assert timer.result()["iterate"] >= first

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

