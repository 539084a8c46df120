"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
    - Provenance metadata contains expected version keys
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pylinreg
from pylinreg.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={'method': 'test'},
        timing=None,
        backend_name='cpu_test',
    )
    kwargs.update(overrides)
    return Result(**kwargs)


class TestConstruction:

    def test_payload_accessible(self):
        result = _make()
        assert result.params.value == 1.0
        assert result.info == {'method': 'test'}
        assert result.backend_name == 'cpu_test'

    def test_warnings_default_empty(self):
        assert _make().warnings == ()

    def test_timing_optional(self):
        result = _make(timing={'total_seconds': 0.5})
        assert result.timing['total_seconds'] == 0.5


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_reassign_warnings(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ('late',)


class TestHasWarning:

    def test_substring_match(self):
        result = _make(warnings=('slope is not finite; set to 0.0',))
        assert result.has_warning('slope')
        assert result.has_warning('set to 0.0')

    def test_no_match(self):
        result = _make(warnings=('slope is not finite',))
        assert not result.has_warning('intercept')

    def test_empty_warnings(self):
        assert not _make().has_warning('anything')


class TestProvenance:

    def test_default_keys(self):
        prov = _default_provenance()
        assert set(prov) == {'pylinreg_version', 'numpy_version', 'python_version'}

    def test_versions_match_runtime(self):
        prov = _make().provenance
        assert prov['pylinreg_version'] == pylinreg.__version__
        assert prov['numpy_version'] == np.__version__

    def test_each_result_gets_own_dict(self):
        a, b = _make(), _make()
        assert a.provenance == b.provenance
        assert a.provenance is not b.provenance
