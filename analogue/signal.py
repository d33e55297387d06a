"""
analogue/signal.py: The Signal value type and its composition operators.

A Signal is an amplitude as a function of time, plus three affine
adjustments applied around a shared, read-only evaluator:

    at(t) = evaluator(mul_input * t + add_input) * mul_output

Design:
    - Signal is a frozen dataclass. scale/phase/incr_frequency/sum return
      new Signals; the evaluator is shared between them, never mutated.
    - Evaluators are structural (Evaluator protocol): any object with
      ``evaluate(time)`` and ``is_stochastic`` works. Concrete variants:
          FunctionEvaluator    : wraps a plain callable
          SumEvaluator         : pointwise sum of signals
          WeightedSumEvaluator : pointwise weighted sum of signals
          TableEvaluator       : periodic sample table (analogue/table.py)
          GaussianNoise        : stochastic, ignores time (analogue/noise.py)
    - Deterministic signals are referentially transparent: the same t always
      gives the same amplitude, from any number of reader threads.
      Stochastic signals (noise) are the documented exception.
    - The continuous form is primary. to_table()/from_fn() convert to the
      sample-table form explicitly; the two are not bit-compatible.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from analogue.config import DEFAULT_CONFIG, SynthesisConfig
from analogue.table import SampleTable, TableEvaluator
from analogue.units import FrequencyHz, TimeSecs

# ---------------------------------------------------------------------------
# Evaluator protocol and deterministic variants
# ---------------------------------------------------------------------------


@runtime_checkable
class Evaluator(Protocol):
    """
    Protocol for the function underneath a Signal.

    Implementations must not mutate shared state during ``evaluate`` unless
    they declare ``is_stochastic = True``.
    """

    is_stochastic: bool

    def evaluate(self, time: TimeSecs) -> float:
        """Amplitude at ``time`` (already adjusted by the owning Signal)."""
        ...


@dataclass(frozen=True)
class FunctionEvaluator:
    """Adapter from a ``TimeSecs -> float`` callable to an Evaluator."""

    fn: Callable[[TimeSecs], float]
    is_stochastic: bool = False

    def evaluate(self, time: TimeSecs) -> float:
        return float(self.fn(time))


@dataclass(frozen=True)
class SumEvaluator:
    """Pointwise sum of its operand signals. Empty sums evaluate to 0.0."""

    signals: tuple[Signal, ...]

    @property
    def is_stochastic(self) -> bool:
        return any(s.is_stochastic for s in self.signals)

    def evaluate(self, time: TimeSecs) -> float:
        return sum((s.at(time) for s in self.signals), 0.0)


@dataclass(frozen=True)
class WeightedSumEvaluator:
    """Pointwise sum of ``weight * signal`` pairs."""

    signals: tuple[Signal, ...]
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.signals) != len(self.weights):
            raise ValueError(
                f"Weighted sum needs one weight per signal, "
                f"got {len(self.signals)} signals and {len(self.weights)} weights"
            )

    @property
    def is_stochastic(self) -> bool:
        return any(s.is_stochastic for s in self.signals)

    def evaluate(self, time: TimeSecs) -> float:
        return sum((w * s.at(time) for s, w in zip(self.signals, self.weights)), 0.0)


def _silence(_time: TimeSecs) -> float:
    return 0.0


_ZERO = FunctionEvaluator(_silence)


# ---------------------------------------------------------------------------
# Signal
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Signal:
    """An amplitude as a function of time, closed under composition.

    Attributes:
        evaluator:  Shared, read-only function of (adjusted) time.
        mul_input:  Frequency multiplier applied to t before evaluation.
        add_input:  Phase offset in seconds, added after mul_input.
        mul_output: Amplitude multiplier applied after evaluation.

    ``Signal()`` is the zero signal: 0.0 everywhere, identity adjustments.
    """

    evaluator: Evaluator = field(default=_ZERO)
    mul_input: float = 1.0
    add_input: float = 0.0
    mul_output: float = 1.0

    # -- construction -------------------------------------------------------

    @classmethod
    def new(cls, fn: Callable[[TimeSecs], float]) -> Signal:
        """Wrap an arbitrary time -> amplitude callable, identity adjustments."""
        return cls(FunctionEvaluator(fn))

    @classmethod
    def from_fn(
        cls,
        fn: Callable[[TimeSecs], float],
        sample_rate: FrequencyHz | float,
        period: TimeSecs | float,
        *,
        config: SynthesisConfig = DEFAULT_CONFIG,
    ) -> Signal:
        """Precompute ``fn`` into a periodic sample table and wrap it.

        Raises:
            TableConstructionError: If the table cannot be built.
        """
        table = SampleTable.from_fn(fn, sample_rate, period, config=config)
        return cls(TableEvaluator(table))

    @classmethod
    def from_table(cls, table: SampleTable) -> Signal:
        return cls(TableEvaluator(table))

    # -- evaluation ---------------------------------------------------------

    @property
    def is_stochastic(self) -> bool:
        """True when evaluating twice at the same time may give different values."""
        return self.evaluator.is_stochastic

    def at(self, time: TimeSecs | float) -> float:
        """Amplitude at ``time``.

        Pure for deterministic signals. NaN/inf in the input propagate.
        """
        adjusted = TimeSecs(self.mul_input * float(time) + self.add_input)
        return self.evaluator.evaluate(adjusted) * self.mul_output

    # -- transforms ---------------------------------------------------------

    def scale(self, factor: float) -> Signal:
        """Multiply the amplitude. 0 silences the signal, negative inverts it."""
        return replace(self, mul_output=self.mul_output * factor)

    def phase(self, offset: TimeSecs | float) -> Signal:
        """Shift the waveform earlier in time by ``offset`` seconds.

        The offset is added to the evaluation time, so at(t) afterwards
        returns what at(t + offset) returned before.
        """
        return replace(self, add_input=self.add_input + float(offset))

    def incr_frequency(self, factor: float) -> Signal:
        """Compress (factor > 1) or stretch (0 < factor < 1) the waveform in time.

        Raises:
            ValueError: If factor is not > 0.
        """
        if not factor > 0:
            raise ValueError(f"incr_frequency factor must be > 0, got {factor}")
        return replace(self, mul_input=self.mul_input * factor)

    # -- combination --------------------------------------------------------

    @staticmethod
    def sum(signals: Iterable[Signal]) -> Signal:
        """Pointwise sum of ``signals``. An empty iterable gives the zero signal.

        Operands need not share a period. Operands that are themselves
        unadjusted sums are spliced in, so chains of ``+`` stay one level deep.
        """
        operands: list[Signal] = []
        for signal in signals:
            if signal._is_plain_sum():
                operands.extend(signal.evaluator.signals)
            else:
                operands.append(signal)
        return Signal(SumEvaluator(tuple(operands)))

    @staticmethod
    def mix(signals: Sequence[Signal], weights: Sequence[float]) -> Signal:
        """Pointwise weighted sum: sum(w_i * s_i).

        Raises:
            ValueError: If signals and weights differ in length.
        """
        return Signal(WeightedSumEvaluator(tuple(signals), tuple(float(w) for w in weights)))

    def __add__(self, other: object) -> Signal:
        if not isinstance(other, Signal):
            return NotImplemented
        return Signal.sum((self, other))

    def __radd__(self, other: object) -> Signal:
        # Lets builtins.sum() start from its default 0 (or 0.0).
        if isinstance(other, (int, float)) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def _is_plain_sum(self) -> bool:
        return (
            isinstance(self.evaluator, SumEvaluator)
            and self.mul_input == 1.0
            and self.add_input == 0.0
            and self.mul_output == 1.0
        )

    # -- representation change ----------------------------------------------

    def to_table(
        self,
        sample_rate: FrequencyHz | float,
        period: TimeSecs | float,
        *,
        config: SynthesisConfig = DEFAULT_CONFIG,
    ) -> Signal:
        """Freeze one period of this signal into a sample-table Signal.

        Raises:
            ValueError: If the signal is stochastic; a table would freeze one
                random draw per entry.
            TableConstructionError: If the table cannot be built.
        """
        if self.is_stochastic:
            raise ValueError("Cannot convert a stochastic signal to a sample table")
        return Signal.from_fn(self.at, sample_rate, period, config=config)
