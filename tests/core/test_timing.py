"""
Tests for the Timer used by backends.
"""

import pytest

from pylinreg.core.compute.timing import Timer


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('mean_pass'):
            pass
        with timer.section('deviation_pass'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'mean_pass', 'deviation_pass'}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('pass'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'pass']

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
