"""
analogue/units.py: Strongly-typed time and frequency scalars.

Both types are frozen dataclasses: immutable, ordered, hashable value
objects. Wrapping the raw numbers keeps seconds and hertz from being mixed
up at call sites (a frequency is never accidentally passed as a time).

Types:
    TimeSecs   : real seconds since an arbitrary epoch (t=0 is phase zero)
    FrequencyHz: non-negative integer cycles per second

Arithmetic:
    TimeSecs    op TimeSecs | real  -> TimeSecs   (op in + - * /)
    FrequencyHz op FrequencyHz      -> FrequencyHz (op in + - * / //)
    FrequencyHz * TimeSecs          -> float       (phase in cycles)

Finite values are not enforced for TimeSecs: NaN/inf are caller error and
propagate under IEEE-754 semantics.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

# ---------------------------------------------------------------------------
# TimeSecs
# ---------------------------------------------------------------------------


def _seconds(value: object) -> float | None:
    """Return the seconds carried by a TimeSecs or plain real, else None."""
    if isinstance(value, TimeSecs):
        return value.seconds
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    return None


@dataclass(frozen=True, order=True)
class TimeSecs:
    """A point or span in time, in seconds.

    Invariants:
        None beyond being a real number. Default is 0.0 (phase zero).
    """

    seconds: float = 0.0

    def __float__(self) -> float:
        return float(self.seconds)

    def __add__(self, other: object) -> TimeSecs:
        rhs = _seconds(other)
        if rhs is None:
            return NotImplemented
        return TimeSecs(self.seconds + rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> TimeSecs:
        rhs = _seconds(other)
        if rhs is None:
            return NotImplemented
        return TimeSecs(self.seconds - rhs)

    def __rsub__(self, other: object) -> TimeSecs:
        lhs = _seconds(other)
        if lhs is None:
            return NotImplemented
        return TimeSecs(lhs - self.seconds)

    def __mul__(self, other: object) -> TimeSecs:
        rhs = _seconds(other)
        if rhs is None:
            return NotImplemented
        return TimeSecs(self.seconds * rhs)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> TimeSecs:
        rhs = _seconds(other)
        if rhs is None:
            return NotImplemented
        return TimeSecs(self.seconds / rhs)

    def __rtruediv__(self, other: object) -> TimeSecs:
        lhs = _seconds(other)
        if lhs is None:
            return NotImplemented
        return TimeSecs(lhs / self.seconds)

    def __neg__(self) -> TimeSecs:
        return TimeSecs(-self.seconds)


# ---------------------------------------------------------------------------
# FrequencyHz
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class FrequencyHz:
    """A frequency in whole cycles per second.

    Invariants:
        hertz is an int >= 0. Default is 0 Hz.

    ``period()`` is undefined at 0 Hz and raises; callers must guard.
    """

    hertz: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.hertz, bool) or not isinstance(self.hertz, int):
            raise ValueError(f"FrequencyHz.hertz must be an int, got {self.hertz!r}")
        if self.hertz < 0:
            raise ValueError(f"FrequencyHz.hertz must be >= 0, got {self.hertz}")

    def __int__(self) -> int:
        return self.hertz

    def __float__(self) -> float:
        return float(self.hertz)

    def at(self, t: TimeSecs | float) -> float:
        """Phase accumulated by time ``t``, in cycles (not radians)."""
        return self.hertz * float(t)

    def period(self) -> TimeSecs:
        """Duration of one cycle: ``1 / hertz``.

        Raises:
            ValueError: If the frequency is 0 Hz.
        """
        if self.hertz == 0:
            raise ValueError("period is undefined for a frequency of 0 Hz")
        return TimeSecs(1.0 / self.hertz)

    def __add__(self, other: object) -> FrequencyHz:
        if not isinstance(other, FrequencyHz):
            return NotImplemented
        return FrequencyHz(self.hertz + other.hertz)

    def __sub__(self, other: object) -> FrequencyHz:
        if not isinstance(other, FrequencyHz):
            return NotImplemented
        return FrequencyHz(self.hertz - other.hertz)

    def __mul__(self, other: object) -> FrequencyHz | float:
        if isinstance(other, TimeSecs):
            return self.at(other)
        if not isinstance(other, FrequencyHz):
            return NotImplemented
        return FrequencyHz(self.hertz * other.hertz)

    def __rmul__(self, other: object) -> float:
        if isinstance(other, TimeSecs):
            return self.at(other)
        return NotImplemented

    def __floordiv__(self, other: object) -> FrequencyHz:
        if not isinstance(other, FrequencyHz):
            return NotImplemented
        return FrequencyHz(self.hertz // other.hertz)

    # Whole-hertz division truncates, so / behaves like //.
    __truediv__ = __floordiv__
