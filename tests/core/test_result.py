"""
Tests for the Result[P] envelope.

Validates:
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyexactstats.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(info={"computed": ["median"]}, timing={"total_seconds": 0.01})
        assert result.params.value == 1.0
        assert result.info["computed"] == ["median"]
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        assert _result().warnings == ()

    def test_provenance_auto_generated(self):
        result = _result()
        assert "pyexactstats_version" in result.provenance
        assert "numpy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}

    def test_frozen(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.timing = {}


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("3 NaN sample(s) present; statistics propagate NaN",))
        assert result.has_warning("NaN sample") is True
        assert result.has_warning("propagate") is True

    def test_no_match(self):
        result = _result(warnings=("dropped 1 NaN sample(s)",))
        assert result.has_warning("empty") is False


class TestDefaultProvenance:

    def test_version_matches_package(self):
        import pyexactstats
        assert _default_provenance()["pyexactstats_version"] == pyexactstats.__version__

    def test_independent_copies(self):
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2
