"""
analogue/analysis.py: Power estimation for signals.

rms() draws a fixed number of evenly spaced points over a window and
accumulates their squares with the running-mean recurrence

    mean_n = mean_{n-1} + (x_n - mean_{n-1}) / n

instead of summing then dividing, which bounds floating-point error growth.
The point count (config.rms_samples, 100 by default) is fixed; average over
several windows externally if a tighter estimate is needed.
"""

from __future__ import annotations

import math

from analogue.config import DEFAULT_CONFIG, SynthesisConfig
from analogue.signal import Signal
from analogue.units import TimeSecs


def rms(
    signal: Signal,
    period: TimeSecs | float,
    *,
    config: SynthesisConfig = DEFAULT_CONFIG,
) -> float:
    """Root-mean-square amplitude of ``signal`` over ``[0, period)``.

    Samples are taken at t_n = n * period / samples for n in [0, samples).

    Args:
        signal: Signal to measure. Stochastic signals are allowed.
        period: Measurement window in seconds. Use the signal's period for
            an exact estimate of a periodic waveform.
        config: Supplies the sample count.

    Returns:
        RMS estimate (>= 0, or NaN if the signal produced NaN).

    Raises:
        ValueError: If period is not > 0.

    Examples:
        >>> rms(square_wave(FrequencyHz(3)), TimeSecs(0.7))
        1.0
    """
    window = float(period)
    if not window > 0:
        raise ValueError(f"rms period must be > 0, got {window}")

    samples = config.rms_samples
    step = window / samples
    mean = 0.0
    for n in range(1, samples + 1):
        x = signal.at(TimeSecs((n - 1) * step))
        mean += (x * x - mean) / n
    return math.sqrt(mean)
