"""
Tests for RegressionBuilder: accumulation, flat sequences, state machine.
"""

import numpy as np
import pytest

from pylinreg.core.exceptions import (
    BuilderStateError,
    DimensionError,
    ValidationError,
)
from pylinreg.regression import Observation, RegressionBuilder, RegressionSolution


class TestAdd:

    def test_add_point(self):
        builder = RegressionBuilder().add(Observation(1, 2))
        assert builder.observations == (Observation(1, 2),)

    def test_add_xy(self):
        builder = RegressionBuilder().add(1, 2).add(3.5, -1)
        assert builder.observations == (Observation(1, 2), Observation(3.5, -1))

    def test_chaining_returns_same_builder(self):
        builder = RegressionBuilder()
        assert builder.add(0, 0) is builder
        assert builder.add_many([]) is builder
        assert builder.add_flat([1, 2]) is builder

    def test_add_single_number_rejected(self):
        with pytest.raises(ValidationError, match="Observation"):
            RegressionBuilder().add(1.0)

    def test_len(self):
        assert len(RegressionBuilder().add(0, 0).add(1, 1)) == 2


class TestAddMany:

    def test_preserves_order(self):
        points = [Observation(3, 0), Observation(1, 0), Observation(2, 0)]
        assert RegressionBuilder().add_many(points).observations == tuple(points)

    def test_accepts_pairs_and_generators(self):
        builder = RegressionBuilder().add_many((i, 2 * i) for i in range(3))
        assert builder.observations[2] == Observation(2, 4)

    def test_accepts_numpy_rows(self):
        data = np.array([[0.0, 1.0], [2.0, 3.0]])
        builder = RegressionBuilder().add_many(data)
        assert builder.observations == (Observation(0, 1), Observation(2, 3))

    def test_bad_element_leaves_builder_unchanged(self):
        builder = RegressionBuilder().add(9, 9)
        with pytest.raises(ValidationError, match=r"points\[1\]"):
            builder.add_many([(1, 2), (3,)])
        assert builder.observations == (Observation(9, 9),)


class TestAddFlat:

    def test_pairs_alternating_values(self):
        builder = RegressionBuilder().add_flat([1, 2, 3, 4, 5, 6])
        assert builder.observations == (
            Observation(1, 2), Observation(3, 4), Observation(5, 6),
        )

    def test_numpy_input(self):
        builder = RegressionBuilder().add_flat(np.arange(4.0))
        assert builder.observations == (Observation(0, 1), Observation(2, 3))

    def test_odd_length_rejected(self):
        with pytest.raises(DimensionError, match="odd"):
            RegressionBuilder().add_flat([1, 2, 3])

    def test_empty_rejected(self):
        with pytest.raises(DimensionError, match="empty"):
            RegressionBuilder().add_flat([])

    def test_odd_length_is_validation_error(self):
        """DimensionError is catchable as the general invalid-argument error."""
        with pytest.raises(ValidationError):
            RegressionBuilder().add_flat([1.0])

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            RegressionBuilder().add_flat([[1, 2], [3, 4]])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError):
            RegressionBuilder().add_flat(["1", "2"])


class TestConfiguration:

    def test_defaults(self):
        builder = RegressionBuilder()
        assert builder.strict is True
        assert builder.state == 'open'
        assert builder.column_name_x == 'x'
        assert builder.column_name_y == 'y'
        assert builder.column_names == ()

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            RegressionBuilder(backend='gpu')


class TestFinalize:

    def test_returns_solution(self):
        solution = RegressionBuilder().add_flat([0, 1, 1, 3, 2, 5]).finalize()
        assert isinstance(solution, RegressionSolution)
        assert solution.slope == pytest.approx(2.0)
        assert solution.intercept == pytest.approx(1.0)

    def test_mixed_sources(self, abc_csv):
        solution = (
            RegressionBuilder()
            .add(Observation(7, 9))
            .add(10, 12)
            .add_many([(13, 15)])
            .add_flat([16, 18])
            .add_table(abc_csv, ("a", "c"))
            .finalize()
        )
        assert solution.n == 6
        assert solution.slope == pytest.approx(1.0)
        assert solution.intercept == pytest.approx(2.0)
        assert solution.observations[0] == Observation(7, 9)
        assert solution.observations[-1] == Observation(4, 6)

    def test_state_becomes_finalized(self):
        builder = RegressionBuilder().add_flat([0, 0, 1, 1, 2, 3])
        builder.finalize()
        assert builder.is_finalized
        assert builder.state == 'finalized'

    def test_second_finalize_rejected(self):
        builder = RegressionBuilder().add_flat([0, 0, 1, 1, 2, 3])
        builder.finalize()
        with pytest.raises(BuilderStateError) as exc_info:
            builder.finalize()
        assert exc_info.value.state == 'finalized'

    @pytest.mark.parametrize("mutate", [
        lambda b: b.add(1, 1),
        lambda b: b.add(Observation(1, 1)),
        lambda b: b.add_many([(1, 1)]),
        lambda b: b.add_flat([1, 1]),
        lambda b: b.add_table("unused.csv"),
    ])
    def test_mutation_after_finalize_rejected(self, mutate):
        builder = RegressionBuilder().add_flat([0, 0, 1, 1, 2, 3])
        solution = builder.finalize()
        with pytest.raises(BuilderStateError):
            mutate(builder)
        assert solution.n == 3

    def test_solution_does_not_alias_builder(self):
        points = [Observation(0, 0), Observation(1, 1), Observation(2, 3)]
        builder = RegressionBuilder().add_many(points)
        solution = builder.finalize()
        points.append(Observation(100, 100))
        assert solution.n == 3
        assert isinstance(solution.observations, tuple)

    def test_failed_finalize_keeps_builder_open(self):
        builder = RegressionBuilder().add(0, 0).add(1, 1)
        with pytest.raises(ValidationError, match="at least 3"):
            builder.finalize()
        assert builder.state == 'open'
        solution = builder.add(2, 2).finalize()
        assert solution.slope == pytest.approx(1.0)

    def test_snapshot_is_a_copy(self):
        builder = RegressionBuilder().add(0, 0)
        snapshot = builder.observations
        builder.add(1, 1)
        assert len(snapshot) == 1
