"""Generation pipeline: length policy, sample rendering and output."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .config import (
    CountLength,
    CycleLength,
    DurationLength,
    GenerateConfig,
    HarmonicsGenerator,
    SweepGenerator,
    ToneGenerator,
)
from .errors import NoHarmonicsError, UnsupportedLengthPolicyError
from .generators import SampleBuffer, generate_harmonics, generate_sine, generate_sweep
from .harmonics import (
    HarmonicComponent,
    HarmonicSet,
    harmonic_frequencies,
    load_harmonics,
    normalize_harmonics,
)
from .length import (
    ByDuration,
    ByExplicitCount,
    BySyncCycle,
    LengthPolicy,
    resolve_sample_count,
)
from .writers import save_samples

_LOGGER = logging.getLogger("wavgen.main")


def build_length_policy(
    config: GenerateConfig,
    harmonics: Sequence[HarmonicComponent] | None = None,
) -> LengthPolicy:
    match config.length:
        case DurationLength(seconds=seconds):
            return ByDuration(seconds=seconds, sampling_rate=config.sampling_rate)
        case CountLength(samples=samples):
            return ByExplicitCount(count=samples, channels=config.channels)
        case CycleLength():
            pass

    match config.generator:
        case ToneGenerator(frequency=frequency):
            frequencies: tuple[int, ...] = (frequency,)
        case HarmonicsGenerator():
            if not harmonics:
                raise NoHarmonicsError()
            frequencies = tuple(harmonic_frequencies(harmonics))
        case SweepGenerator():
            raise UnsupportedLengthPolicyError(
                "a synchronized cycle is undefined for a frequency sweep"
            )
    return BySyncCycle(frequencies=frequencies, sampling_rate=config.sampling_rate)


def _load_checked(path: Path) -> HarmonicSet:
    harmonics = load_harmonics(path)
    if not harmonics:
        raise NoHarmonicsError()
    return harmonics


def render_samples(config: GenerateConfig) -> SampleBuffer:
    """Resolve the length and run the configured generator."""
    harmonics: HarmonicSet | None = None
    if isinstance(config.generator, HarmonicsGenerator):
        harmonics = _load_checked(config.generator.path)

    number_samples = resolve_sample_count(build_length_policy(config, harmonics))
    _LOGGER.debug(
        "Generating %d samples per channel (%s, %s)",
        number_samples,
        config.generator.kind,
        config.channels,
    )

    match config.generator:
        case ToneGenerator(frequency=frequency):
            return generate_sine(
                frequency, number_samples, config.channels, config.volume, config.sampling_rate
            )
        case SweepGenerator(start=start, finish=finish):
            return generate_sweep(
                start, finish, number_samples, config.channels, config.volume, config.sampling_rate
            )
        case HarmonicsGenerator():
            assert harmonics is not None
            normalize_harmonics(harmonics)
            return generate_harmonics(
                harmonics, number_samples, config.channels, config.volume, config.sampling_rate
            )
    raise TypeError(f"Unknown generator: {config.generator!r}")


def generate(config: GenerateConfig) -> Path:
    """Render samples for `config` and write them to `config.output`."""
    samples = render_samples(config)
    path = save_samples(
        config.output,
        samples,
        config.output_format,
        channels=config.channels,
        sampling_rate=config.sampling_rate,
    )
    _LOGGER.info("Wrote %d values to %s", samples.size, path)
    return path
