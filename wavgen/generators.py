"""Signal generators producing interleaved signed 16-bit sample buffers.

Every generator evaluates `volume * sin(phase)` per sample index, truncates
toward zero and writes each value once (mono) or twice (stereo).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

from .errors import NoHarmonicsError
from .harmonics import HarmonicComponent
from .length import ChannelLayout, channel_count

_LOGGER = logging.getLogger("wavgen.generators")

SAMPLE_RATE = 44_100
DEFAULT_VOLUME = 10_000

INT16_MIN = -32_768
INT16_MAX = 32_767

FloatArray: TypeAlias = NDArray[np.float64]
SampleBuffer: TypeAlias = NDArray[np.int16]


def quantize(values: NDArray[Any]) -> SampleBuffer:
    """Truncate toward zero and saturate into the signed 16-bit range."""
    return np.clip(np.trunc(values), INT16_MIN, INT16_MAX).astype(np.int16)


def _interleave(values: SampleBuffer, channels: ChannelLayout) -> SampleBuffer:
    return np.repeat(values, channel_count(channels))


def generate_sine(
    frequency: float,
    number_samples: int,
    channels: ChannelLayout = "mono",
    volume: float = DEFAULT_VOLUME,
    sampling_rate: int = SAMPLE_RATE,
) -> SampleBuffer:
    """Pure tone; frequencies above Nyquist are not rejected."""
    t = np.arange(number_samples, dtype=np.float64)
    phase = 2 * np.pi * frequency * t / sampling_rate
    return _interleave(quantize(volume * np.sin(phase)), channels)


def sweep_frequencies(start: float, finish: float, number_samples: int) -> FloatArray:
    """Instantaneous frequency per sample for a linear sweep.

    The frequency is an accumulator advanced by a fixed increment once per
    sample, so the result follows floating-point accumulation order rather
    than `start + t * increment`. The accumulator never passes `finish`.
    """
    frequencies = np.empty(number_samples, dtype=np.float64)
    if number_samples == 0:
        return frequencies
    increment = (finish - start) / number_samples
    limit = min if finish >= start else max
    frequency = float(start)
    for t in range(number_samples):
        frequencies[t] = frequency
        frequency = limit(frequency + increment, float(finish))
    return frequencies


def generate_sweep(
    start: float,
    finish: float,
    number_samples: int,
    channels: ChannelLayout = "mono",
    volume: float = DEFAULT_VOLUME,
    sampling_rate: int = SAMPLE_RATE,
) -> SampleBuffer:
    t = np.arange(number_samples, dtype=np.float64)
    frequencies = sweep_frequencies(start, finish, number_samples)
    phase = 2 * np.pi * frequencies * t / sampling_rate
    return _interleave(quantize(volume * np.sin(phase)), channels)


def generate_harmonics(
    harmonics: Sequence[HarmonicComponent],
    number_samples: int,
    channels: ChannelLayout = "mono",
    volume: float = DEFAULT_VOLUME,
    sampling_rate: int = SAMPLE_RATE,
) -> SampleBuffer:
    """Superpose one sine layer per harmonic, scaled by its amplitude.

    Layers are truncated individually and summed in a wider integer buffer,
    then saturated to the 16-bit range.
    """
    if not harmonics:
        raise NoHarmonicsError()
    base, *rest = harmonics
    accumulator = generate_sine(
        base.frequency, number_samples, channels, base.amplitude * volume, sampling_rate
    ).astype(np.int32)
    for component in rest:
        accumulator += generate_sine(
            component.frequency,
            number_samples,
            channels,
            component.amplitude * volume,
            sampling_rate,
        )
    overflow = int(np.count_nonzero((accumulator < INT16_MIN) | (accumulator > INT16_MAX)))
    if overflow:
        _LOGGER.warning("Clamping %d harmonic samples to the 16-bit range", overflow)
    return np.clip(accumulator, INT16_MIN, INT16_MAX).astype(np.int16)
