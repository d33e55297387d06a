"""
analogue: Composable signal synthesis.

Models time-varying scalar signals as immutable values that can be
generated, combined, transformed, sampled and analyzed. Pure library code:
no audio device I/O, no rendering. The host drives playback and plotting
through ``Signal.at`` and ``sample``.

Public API:
    Units:       TimeSecs, FrequencyHz
    Signal:      Signal, Evaluator, FunctionEvaluator, SumEvaluator,
                 WeightedSumEvaluator
    Tables:      SampleTable, TableEvaluator, TableConstructionError
    Generators:  sine_wave, square_wave
    Sampling:    sample, sample_block
    Analysis:    rms
    Noise:       gaussian_white_noise, noise_rms_for_snr, GaussianNoise
    Config:      SynthesisConfig, TimeConvention, DEFAULT_CONFIG,
                 LEGACY_CONFIG, config_from_env
"""

from analogue.analysis import rms
from analogue.config import (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    SynthesisConfig,
    TimeConvention,
    config_from_env,
)
from analogue.generators import sine_wave, square_wave
from analogue.noise import GaussianNoise, gaussian_white_noise, noise_rms_for_snr
from analogue.sampling import sample, sample_block
from analogue.signal import (
    Evaluator,
    FunctionEvaluator,
    Signal,
    SumEvaluator,
    WeightedSumEvaluator,
)
from analogue.table import SampleTable, TableConstructionError, TableEvaluator
from analogue.units import FrequencyHz, TimeSecs

__all__ = [
    "TimeSecs",
    "FrequencyHz",
    "Signal",
    "Evaluator",
    "FunctionEvaluator",
    "SumEvaluator",
    "WeightedSumEvaluator",
    "SampleTable",
    "TableEvaluator",
    "TableConstructionError",
    "sine_wave",
    "square_wave",
    "sample",
    "sample_block",
    "rms",
    "gaussian_white_noise",
    "noise_rms_for_snr",
    "GaussianNoise",
    "SynthesisConfig",
    "TimeConvention",
    "DEFAULT_CONFIG",
    "LEGACY_CONFIG",
    "config_from_env",
]
