"""
Tests for analogue/table.py: periodic sample-table representation.

Validates:
    - Construction invariants (coverage, positivity, non-empty)
    - from_fn under both time conventions
    - Modulo indexing, including negative times and wrap-around
    - scale / phase (rotation) / incr_frequency (rescale without resampling)
    - sum onto a common grid of max period and max rate
"""

import math

import pytest

from analogue.config import LEGACY_CONFIG, SynthesisConfig, TimeConvention
from analogue.table import SampleTable, TableConstructionError, TableEvaluator
from analogue.units import FrequencyHz, TimeSecs


def _quarter_table() -> SampleTable:
    """4 samples/s over 1 s: amplitudes 0, 1, 2, 3."""
    return SampleTable(samples=(0.0, 1.0, 2.0, 3.0), sample_rate=4.0, period=1.0)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_fields_normalised_to_float(self):
        table = SampleTable(samples=(1, 2), sample_rate=2, period=1)
        assert table.samples == (1.0, 2.0)
        assert isinstance(table.sample_rate, float)

    def test_accepts_unit_types(self):
        table = SampleTable(samples=(0.0, 1.0), sample_rate=FrequencyHz(2), period=TimeSecs(1.0))
        assert table.sample_rate == 2.0
        assert table.period == 1.0

    def test_one_short_of_full_period_is_allowed(self):
        table = SampleTable(samples=(0.0, 1.0, 2.0), sample_rate=4.0, period=1.0)
        assert len(table) == 3

    def test_insufficient_samples_is_fatal(self):
        with pytest.raises(TableConstructionError, match="needs at least 3 samples"):
            SampleTable(samples=(0.0, 1.0), sample_rate=4.0, period=1.0)

    def test_construction_error_is_value_error(self):
        assert issubclass(TableConstructionError, ValueError)

    def test_empty_table_rejected(self):
        with pytest.raises(TableConstructionError, match="must not be empty"):
            SampleTable(samples=(), sample_rate=0.5, period=1.0)

    @pytest.mark.parametrize("rate,period", [(0.0, 1.0), (-4.0, 1.0), (4.0, 0.0), (4.0, -1.0)])
    def test_non_positive_rate_or_period_rejected(self, rate: float, period: float):
        with pytest.raises(TableConstructionError, match="must be > 0"):
            SampleTable(samples=(0.0,), sample_rate=rate, period=period)

    def test_is_frozen_and_hashable(self):
        table = _quarter_table()
        with pytest.raises((TypeError, AttributeError)):
            table.period = 2.0  # type: ignore[misc]
        assert len({table, _quarter_table()}) == 1


class TestFromFn:
    def test_seconds_convention(self):
        table = SampleTable.from_fn(lambda t: t.seconds, FrequencyHz(4), TimeSecs(1.0))
        assert table.samples == (0.0, 0.25, 0.5, 0.75)

    def test_sample_index_convention(self):
        table = SampleTable.from_fn(
            lambda t: t.seconds, FrequencyHz(4), TimeSecs(1.0), config=LEGACY_CONFIG
        )
        assert table.samples == (0.0, 1.0, 2.0, 3.0)

    def test_sample_count_is_floor_of_rate_times_period(self):
        table = SampleTable.from_fn(lambda t: 0.0, 10.0, 0.35)
        assert len(table) == 3

    def test_zero_samples_is_fatal(self):
        with pytest.raises(TableConstructionError):
            SampleTable.from_fn(lambda t: 0.0, FrequencyHz(1), TimeSecs(0.5))

    def test_zero_rate_is_fatal(self):
        with pytest.raises(TableConstructionError):
            SampleTable.from_fn(lambda t: 0.0, FrequencyHz(0), TimeSecs(1.0))

    def test_one_sine_period(self):
        freq = FrequencyHz(2)
        table = SampleTable.from_fn(
            lambda t: math.sin(2 * math.pi * freq.at(t)), FrequencyHz(400), freq.period()
        )
        assert len(table) == 200
        assert table.at(0.125) == pytest.approx(1.0)
        assert table.at(0.375) == pytest.approx(-1.0)

    def test_explicit_seconds_config(self):
        config = SynthesisConfig(table_time_convention=TimeConvention.SECONDS)
        table = SampleTable.from_fn(lambda t: t.seconds, 2.0, 1.0, config=config)
        assert table.samples == (0.0, 0.5)


# ---------------------------------------------------------------------------
# Indexing
# ---------------------------------------------------------------------------


class TestIndexing:
    @pytest.mark.parametrize(
        "t,expected",
        [(0.0, 0), (0.24, 0), (0.25, 1), (0.99, 3), (1.0, 0), (2.5, 2), (-0.25, 3), (-1.1, 3)],
    )
    def test_index_for(self, t: float, expected: int):
        assert _quarter_table().index_for(t) == expected

    def test_at_returns_stored_amplitude(self):
        table = _quarter_table()
        assert table.at(TimeSecs(0.5)) == 2.0
        assert table.at(10.75) == 3.0

    def test_index_wraps_when_table_is_short(self):
        table = SampleTable(samples=(5.0, 6.0, 7.0), sample_rate=4.0, period=1.0)
        assert table.index_for(0.75) == 0
        assert table.at(0.75) == 5.0

    def test_repeatable(self):
        table = _quarter_table()
        assert {table.at(0.6) for _ in range(50)} == {2.0}

    def test_evaluator_adapter(self):
        ev = TableEvaluator(_quarter_table())
        assert ev.evaluate(TimeSecs(0.25)) == 1.0
        assert ev.is_stochastic is False


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


class TestTransforms:
    def test_scale(self):
        scaled = _quarter_table().scale(-2.0)
        assert scaled.samples == (-0.0, -2.0, -4.0, -6.0)
        assert scaled.sample_rate == 4.0
        assert scaled.period == 1.0

    def test_scale_leaves_original(self):
        table = _quarter_table()
        table.scale(10.0)
        assert table.samples == (0.0, 1.0, 2.0, 3.0)

    def test_phase_rotates_left(self):
        assert _quarter_table().phase(0.5).samples == (2.0, 3.0, 0.0, 1.0)

    def test_phase_matches_time_offset_on_boundaries(self):
        table = _quarter_table()
        shifted = table.phase(0.25)
        for t in (0.0, 0.25, 0.5, 0.75):
            assert shifted.at(t) == table.at(t + 0.25)

    def test_phase_truncates_to_sample_boundary(self):
        assert _quarter_table().phase(0.3).samples == _quarter_table().phase(0.25).samples

    def test_phase_wraps_whole_periods(self):
        assert _quarter_table().phase(1.25).samples == _quarter_table().phase(0.25).samples

    def test_negative_phase_rotates_right(self):
        assert _quarter_table().phase(-0.25).samples == (3.0, 0.0, 1.0, 2.0)

    def test_incr_frequency_rescales_without_resampling(self):
        faster = _quarter_table().incr_frequency(2.0)
        assert faster.samples == (0.0, 1.0, 2.0, 3.0)
        assert faster.period == 0.5
        assert faster.sample_rate == 8.0
        assert faster.at(0.125) == 1.0
        assert faster.at(0.5) == 0.0

    @pytest.mark.parametrize("factor", [0.0, -2.0])
    def test_incr_frequency_rejects_non_positive(self, factor: float):
        with pytest.raises(ValueError, match="must be > 0"):
            _quarter_table().incr_frequency(factor)


# ---------------------------------------------------------------------------
# Sum
# ---------------------------------------------------------------------------


class TestSum:
    def test_sum_same_grid(self):
        total = SampleTable.sum([_quarter_table(), _quarter_table().scale(10.0)])
        assert total.samples == (0.0, 11.0, 22.0, 33.0)

    def test_sum_uses_max_period_and_rate(self):
        short = SampleTable(samples=(1.0, -1.0), sample_rate=4.0, period=0.5)
        long = SampleTable(samples=(0.0, 10.0), sample_rate=2.0, period=1.0)
        total = SampleTable.sum([short, long])
        assert total.sample_rate == 4.0
        assert total.period == 1.0
        assert total.samples == (1.0, -1.0, 11.0, 9.0)

    def test_sum_single_table_is_copy(self):
        assert SampleTable.sum([_quarter_table()]).samples == _quarter_table().samples

    def test_sum_of_nothing_rejected(self):
        with pytest.raises(ValueError, match="at least one table"):
            SampleTable.sum([])
