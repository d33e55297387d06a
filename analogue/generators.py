"""
analogue/generators.py: Canonical periodic waveforms.

Both generators return continuous Signals with period 1 / freq and
amplitude range exactly [-1, 1]:

    sine_wave(freq)    sin(2π · freq · t)
    square_wave(freq)  +1 when round(freq · t) is odd, -1 when even

Square-wave tie-break:
    Phases are rounded half away from zero, so a phase of exactly 0.5 rounds
    to 1 (odd, +1) and -0.5 rounds to -1 (odd, +1). t = 0 rounds to 0 (even),
    so every square wave starts at -1.

Overflow:
    A finite time whose phase overflows to +inf evaluates to +1, and -inf to
    -1, so the wave keeps its unit amplitude over arbitrarily long windows.
    NaN times still give NaN.
"""

from __future__ import annotations

import math

from analogue.signal import Signal
from analogue.units import FrequencyHz, TimeSecs


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Works on the fractional part of ``abs(x)``, which is exact, so values
    just below a half and integers beyond 2**52 round correctly.

    Examples:
        >>> round_half_away(0.5), round_half_away(1.5), round_half_away(-0.5)
        (1, 2, -1)
    """
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if x >= 0 else -whole


def sine_wave(freq: FrequencyHz) -> Signal:
    """Unit sine wave at ``freq``, 0.0 at t = 0 and rising. Non-finite phases give NaN."""

    def _sine(t: TimeSecs) -> float:
        phase = freq.at(t)
        if math.isinf(phase):
            return math.nan
        return math.sin(2.0 * math.pi * phase)

    return Signal.new(_sine)


def square_wave(freq: FrequencyHz) -> Signal:
    """Unit square wave at ``freq``, -1.0 at t = 0.

    A phase that overflows to +inf or -inf gives +1.0 or -1.0. NaN gives NaN.
    """

    def _square(t: TimeSecs) -> float:
        phase = freq.at(t)
        if math.isnan(phase):
            return math.nan
        if math.isinf(phase):
            return math.copysign(1.0, phase)
        return 1.0 if round_half_away(phase) % 2 else -1.0

    return Signal.new(_square)
