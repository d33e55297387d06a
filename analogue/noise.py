"""
analogue/noise.py: Additive white Gaussian noise calibrated to an SNR.

gaussian_white_noise(signal, snr_db, duration):
    1. rms_signal = rms(signal, duration)
    2. rms_noise  = sqrt(rms_signal² / 10^(snr_db / 10))
                  = |rms_signal| · 10^(-snr_db / 20)
    3. noise      = Signal(GaussianNoise(rms_noise, rng))
    4. return signal + noise

GaussianNoise is a stochastic evaluator: every evaluate() call is an
independent N(0, std_dev²) draw that ignores time, so evaluating the same t
twice gives different values. Signals built on it report
``is_stochastic = True`` and are the one exception to referential
transparency.

Design:
    - The random source is injected (random.Random) rather than global, so
      a fixed seed reproduces the exact noise sequence in tests.
    - Random.normalvariate is used instead of Random.gauss: gauss caches a
      second value between calls and is not safe across reader threads.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from analogue.analysis import rms
from analogue.config import DEFAULT_CONFIG, SynthesisConfig
from analogue.signal import Signal
from analogue.units import TimeSecs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GaussianNoise:
    """Stochastic evaluator drawing i.i.d. zero-mean Gaussian amplitudes.

    Attributes:
        std_dev: Standard deviation of each draw (= RMS of the noise). >= 0.
        rng:     Random source advanced by every evaluate() call.
    """

    std_dev: float
    rng: random.Random = field(default_factory=random.Random, compare=False)
    is_stochastic: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if not self.std_dev >= 0:
            raise ValueError(f"GaussianNoise.std_dev must be >= 0, got {self.std_dev}")

    def evaluate(self, time: TimeSecs) -> float:
        return self.rng.normalvariate(0.0, self.std_dev)


def noise_rms_for_snr(rms_signal: float, snr_db: float) -> float:
    """Noise RMS that puts a signal of ``rms_signal`` at ``snr_db`` decibels SNR.

    Extreme ratios saturate instead of raising: a very high SNR gives a noise
    RMS of 0.0 or close to it, a very low one gives inf. A silent signal
    always needs no noise.

    Examples:
        >>> noise_rms_for_snr(1.0, 20.0)
        0.1
    """
    if rms_signal == 0:
        return 0.0
    try:
        gain = 10.0 ** (-snr_db / 20.0)
    except OverflowError:
        gain = math.inf
    return abs(rms_signal) * gain


def gaussian_white_noise(
    signal: Signal,
    signal_to_noise_db: float,
    sample_duration: TimeSecs | float,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    config: SynthesisConfig = DEFAULT_CONFIG,
) -> Signal:
    """Add white Gaussian noise to ``signal`` at the requested SNR.

    Args:
        signal:             Base signal. Measured once, over sample_duration.
        signal_to_noise_db: Target ratio of signal power to noise power, in dB.
        sample_duration:    Window passed to rms() for the signal estimate.
        seed:               Seed for a fresh random.Random. Ignored if rng is given.
        rng:                Random source to draw from. None = new Random(seed).
        config:             Passed through to rms().

    Returns:
        A stochastic Signal: ``signal + noise``.

    Raises:
        ValueError: If sample_duration is not > 0.
    """
    rms_signal = rms(signal, sample_duration, config=config)
    rms_noise = noise_rms_for_snr(rms_signal, signal_to_noise_db)
    logger.debug(
        "Calibrated noise: rms_signal=%.6g snr_db=%s rms_noise=%.6g",
        rms_signal,
        signal_to_noise_db,
        rms_noise,
    )

    source = rng if rng is not None else random.Random(seed)
    noise = Signal(GaussianNoise(rms_noise, source))
    return signal + noise
