"""
analogue/table.py: Periodic sample-table representation of a signal.

A SampleTable holds one period of precomputed amplitudes plus the
sample_rate and period used to build it. Evaluation is an O(1) lookup:

    index = floor(sample_rate * (t mod period)) mod len(samples)

Compared with the continuous representation in signal.py:
    - phase() rotates the stored samples instead of offsetting time, so it
      is exact only when the offset lands on a sample boundary.
    - incr_frequency() rescales period and sample_rate without resampling.
    - sum() resamples every operand onto one common table, so tables with
      different periods and resolutions can be combined.

Tables are not bit-compatible with continuous signals. Convert explicitly
via Signal.to_table() / Signal.from_fn() rather than mixing the two.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from analogue.config import DEFAULT_CONFIG, SynthesisConfig, TimeConvention
from analogue.units import FrequencyHz, TimeSecs

logger = logging.getLogger(__name__)


class TableConstructionError(ValueError):
    """Raised when a SampleTable cannot cover one full period at its declared rate."""


def _positive(name: str, value: FrequencyHz | TimeSecs | float) -> float:
    as_float = float(value)
    if not as_float > 0:
        raise TableConstructionError(f"SampleTable.{name} must be > 0, got {as_float}")
    return as_float


# ---------------------------------------------------------------------------
# SampleTable
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SampleTable:
    """One period of amplitudes, indexed by time modulo the period.

    Attributes:
        samples:     Amplitudes covering exactly one period, in time order.
        sample_rate: Table entries per second.
        period:      Seconds covered by the table before it repeats.

    Invariants (enforced):
        len(samples) >= 1
        sample_rate > 0 and period > 0
        len(samples) >= floor(sample_rate * period) - 1
    """

    samples: tuple[float, ...]
    sample_rate: float
    period: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", tuple(float(s) for s in self.samples))
        object.__setattr__(self, "sample_rate", _positive("sample_rate", self.sample_rate))
        object.__setattr__(self, "period", _positive("period", self.period))

        required = math.floor(self.sample_rate * self.period) - 1
        if not self.samples:
            raise TableConstructionError("SampleTable.samples must not be empty")
        if len(self.samples) < required:
            raise TableConstructionError(
                f"SampleTable needs at least {required} samples to cover period "
                f"{self.period}s at {self.sample_rate} samples/s, got {len(self.samples)}"
            )

    @classmethod
    def from_fn(
        cls,
        fn: Callable[[TimeSecs], float],
        sample_rate: FrequencyHz | float,
        period: TimeSecs | float,
        *,
        config: SynthesisConfig = DEFAULT_CONFIG,
    ) -> SampleTable:
        """Build a table by evaluating ``fn`` at N = floor(sample_rate * period) points.

        Sample times follow ``config.table_time_convention``:
            SECONDS       t_k = k / sample_rate
            SAMPLE_INDEX  t_k = k

        Raises:
            TableConstructionError: If rate or period is not positive, or the
                product rounds down to zero samples.
        """
        rate = _positive("sample_rate", sample_rate)
        span = _positive("period", period)
        count = math.floor(rate * span)

        if config.table_time_convention is TimeConvention.SAMPLE_INDEX:
            times = (TimeSecs(float(k)) for k in range(count))
        else:
            times = (TimeSecs(k / rate) for k in range(count))
        samples = tuple(float(fn(t)) for t in times)

        logger.debug(
            "Built sample table: %d samples, rate=%s, period=%s, convention=%s",
            count,
            rate,
            span,
            config.table_time_convention.value,
        )
        return cls(samples=samples, sample_rate=rate, period=span)

    def __len__(self) -> int:
        return len(self.samples)

    def index_for(self, t: TimeSecs | float) -> int:
        """Table index that ``t`` maps onto."""
        wrapped = float(t) % self.period
        return math.floor(self.sample_rate * wrapped) % len(self.samples)

    def at(self, t: TimeSecs | float) -> float:
        """Stored amplitude for time ``t``. O(1) and exactly repeatable."""
        return self.samples[self.index_for(t)]

    def scale(self, factor: float) -> SampleTable:
        """Return a table with every amplitude multiplied by ``factor``."""
        return SampleTable(
            samples=tuple(s * factor for s in self.samples),
            sample_rate=self.sample_rate,
            period=self.period,
        )

    def phase(self, offset: TimeSecs | float) -> SampleTable:
        """Shift earlier in time by rotating the first ``pivot`` entries to the end.

        pivot = floor(sample_rate * offset) mod len(samples). Offsets between
        sample boundaries are truncated to the boundary below.
        """
        pivot = math.floor(self.sample_rate * float(offset)) % len(self.samples)
        return SampleTable(
            samples=self.samples[pivot:] + self.samples[:pivot],
            sample_rate=self.sample_rate,
            period=self.period,
        )

    def incr_frequency(self, factor: float) -> SampleTable:
        """Compress the table in time by ``factor`` without resampling.

        The period shrinks to period / factor and the rate grows to
        sample_rate * factor, so every stored sample is reused as-is. This is
        an approximation: no new points of the underlying waveform are
        evaluated.

        Raises:
            ValueError: If factor is not > 0.
        """
        if not factor > 0:
            raise ValueError(f"incr_frequency factor must be > 0, got {factor}")
        return SampleTable(
            samples=self.samples,
            sample_rate=self.sample_rate * factor,
            period=self.period / factor,
        )

    @staticmethod
    def sum(tables: Sequence[SampleTable]) -> SampleTable:
        """Resample every table onto a common grid and add them pointwise.

        The common grid uses the largest period and the largest sample rate
        among the operands, with entries at t_k = k / rate.

        Raises:
            ValueError: If ``tables`` is empty.
        """
        if not tables:
            raise ValueError("SampleTable.sum needs at least one table")

        rate = max(t.sample_rate for t in tables)
        span = max(t.period for t in tables)
        count = max(math.floor(rate * span), 1)
        samples = tuple(
            sum((table.at(k / rate) for table in tables), 0.0) for k in range(count)
        )
        logger.debug("Summed %d sample tables onto %d samples", len(tables), count)
        return SampleTable(samples=samples, sample_rate=rate, period=span)


# ---------------------------------------------------------------------------
# Evaluator adapter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TableEvaluator:
    """Evaluator backed by a SampleTable (see analogue.signal.Evaluator)."""

    table: SampleTable
    is_stochastic: bool = False

    def evaluate(self, time: TimeSecs) -> float:
        return self.table.at(time)
