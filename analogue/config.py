"""
Configuration dataclasses for signal synthesis and analysis.

These immutable config objects keep tunable constants out of function
signatures, so callers can define a standard configuration once and reuse
it across table construction, RMS estimation and noise calibration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class TimeConvention(str, Enum):
    """Which time values a sample table feeds its evaluator while being built.

    SECONDS:      t_k = k / sample_rate. Table entries are real seconds apart.
    SAMPLE_INDEX: t_k = k. Historical behaviour, only correct in seconds
                  when sample_rate == 1. Kept for compatibility testing.
    """

    SECONDS = "seconds"
    SAMPLE_INDEX = "sample_index"


RMS_SAMPLES: int = 100
"""Points drawn per RMS estimate. An accuracy/cost tradeoff, not derived from the signal."""


@dataclass(frozen=True)
class SynthesisConfig:
    """
    Configuration for sample-table construction and signal analysis.

    Attributes:
        rms_samples: Number of points rms() draws across the measurement
            window. Defaults to 100.
        table_time_convention: Time values passed to the evaluator when a
            SampleTable is built from a function. Defaults to SECONDS.

    Example:
        >>> config = SynthesisConfig(rms_samples=1000)
        >>> rms(sine_wave(FrequencyHz(440)), FrequencyHz(440).period(), config=config)
    """

    rms_samples: int = RMS_SAMPLES
    table_time_convention: TimeConvention = TimeConvention.SECONDS

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.rms_samples, bool) or not isinstance(self.rms_samples, int):
            raise ValueError(f"rms_samples must be an int, got {self.rms_samples!r}")
        if self.rms_samples <= 0:
            raise ValueError(f"rms_samples must be positive, got {self.rms_samples}")
        if not isinstance(self.table_time_convention, TimeConvention):
            raise ValueError(
                f"Unknown table_time_convention {self.table_time_convention!r}, "
                f"valid options: {[c.value for c in TimeConvention]}"
            )


def config_from_env() -> SynthesisConfig:
    """Build a SynthesisConfig from ``ANALOGUE_*`` environment variables.

    Reads:
        ANALOGUE_RMS_SAMPLES           : int, default 100
        ANALOGUE_TABLE_TIME_CONVENTION : "seconds" | "sample_index"

    Raises:
        ValueError: If a variable is set to an unparseable or invalid value.
    """
    raw_samples = os.getenv("ANALOGUE_RMS_SAMPLES", str(RMS_SAMPLES)).strip()
    raw_convention = os.getenv(
        "ANALOGUE_TABLE_TIME_CONVENTION", TimeConvention.SECONDS.value
    ).strip()

    try:
        rms_samples = int(raw_samples)
    except ValueError:
        raise ValueError(f"ANALOGUE_RMS_SAMPLES must be an integer, got {raw_samples!r}") from None
    try:
        convention = TimeConvention(raw_convention.lower())
    except ValueError:
        raise ValueError(
            f"ANALOGUE_TABLE_TIME_CONVENTION must be one of "
            f"{[c.value for c in TimeConvention]}, got {raw_convention!r}"
        ) from None

    return SynthesisConfig(rms_samples=rms_samples, table_time_convention=convention)


# Pre-defined configurations

DEFAULT_CONFIG = SynthesisConfig()
"""Default configuration: 100 RMS samples, tables sampled in seconds."""

LEGACY_CONFIG = SynthesisConfig(table_time_convention=TimeConvention.SAMPLE_INDEX)
"""Tables built from raw sample indices, reproducing the historical convention."""
