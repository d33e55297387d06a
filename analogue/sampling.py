"""
analogue/sampling.py: Discretize a Signal at a fixed rate.

    sample(rate, signal)              lazy, infinite, one-shot iterator
    sample_block(rate, signal, count) finite numpy buffer for hosts

Sample n is taken at t_n = n / rate. Nothing is cached: every pull
re-evaluates signal.at(t_n). To restart, call sample() again.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator

import numpy as np

from analogue.signal import Signal
from analogue.units import FrequencyHz, TimeSecs


def sample(rate: FrequencyHz, signal: Signal) -> Iterator[float]:
    """Amplitudes of ``signal`` at t_n = n / rate for n = 0, 1, 2, ...

    The rate is validated here, not on the first pull.

    Raises:
        ValueError: If rate is 0 Hz.
    """
    interval = rate.period()
    return (signal.at(TimeSecs(n * interval.seconds)) for n in itertools.count())


def sample_block(
    rate: FrequencyHz,
    signal: Signal,
    count: int,
    *,
    start: int = 0,
) -> np.ndarray:
    """Render ``count`` consecutive samples, beginning at sample index ``start``.

    Equivalent to taking items start..start+count of sample(rate, signal),
    returned as a float64 array ready for an audio or plot buffer.

    Args:
        rate:   Sampling rate.
        signal: Signal to evaluate.
        count:  Number of samples (>= 0).
        start:  Index of the first sample (>= 0).

    Returns:
        1-D float64 array of length ``count``.

    Raises:
        ValueError: If rate is 0 Hz, or count/start is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")

    interval = rate.period().seconds
    block = np.empty(count, dtype=np.float64)
    for i in range(count):
        block[i] = signal.at(TimeSecs((start + i) * interval))
    return block
