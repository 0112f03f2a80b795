"""Resolve a length policy into a per-channel sample count."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from typing import Literal, TypeAlias

from .errors import InvalidLengthError

ChannelLayout: TypeAlias = Literal["mono", "stereo"]

# Sample periods are usually fractional; scaling recovers enough integer precision
# for the LCM.
SYNC_SCALE = 20_000

# Per-channel ceiling: four bytes per stereo frame stay inside the 32-bit RIFF size.
MAX_SAMPLES = 1_000_000_000

_CHANNEL_COUNTS: dict[ChannelLayout, int] = {"mono": 1, "stereo": 2}


def channel_count(channels: ChannelLayout) -> int:
    try:
        return _CHANNEL_COUNTS[channels]
    except KeyError as exc:
        raise InvalidLengthError(f"Unknown channel layout: {channels!r}") from exc


@dataclass(frozen=True, slots=True)
class ByDuration:
    seconds: float
    sampling_rate: int


@dataclass(frozen=True, slots=True)
class ByExplicitCount:
    count: int
    channels: ChannelLayout


@dataclass(frozen=True, slots=True)
class BySyncCycle:
    frequencies: tuple[int, ...]
    sampling_rate: int


LengthPolicy: TypeAlias = ByDuration | ByExplicitCount | BySyncCycle


def _lcm(a: int, b: int) -> int:
    return a * b // math.gcd(a, b)


def sync_cycle_samples(frequencies: Sequence[int], sampling_rate: int) -> int:
    """Smallest sample count in which every frequency completes whole cycles."""
    if not frequencies:
        raise InvalidLengthError("a synchronized cycle needs at least one frequency")
    periods: list[int] = []
    for frequency in frequencies:
        if frequency <= 0:
            raise InvalidLengthError(f"cannot synchronize a cycle at {frequency} Hz")
        period = sampling_rate * SYNC_SCALE // frequency
        if period == 0:
            raise InvalidLengthError(f"{frequency} Hz is too high to synchronize at {sampling_rate} Hz")
        periods.append(period)
    samples = reduce(_lcm, periods) // SYNC_SCALE
    if samples == 0:
        raise InvalidLengthError("synchronized cycle is shorter than one sample")
    return samples


def _duration_samples(seconds: float, sampling_rate: int) -> int:
    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidLengthError(f"invalid duration: {seconds} s")
    # Exact decimal value of the shortest repr: 0.29 s at 100 Hz is 29 samples.
    return int(Fraction(repr(seconds)) * sampling_rate)


def _resolve(policy: LengthPolicy) -> int:
    match policy:
        case ByDuration(seconds=seconds, sampling_rate=sampling_rate):
            return _duration_samples(seconds, sampling_rate)
        case ByExplicitCount(count=count, channels=channels):
            per_frame = channel_count(channels)
            if count % per_frame:
                raise InvalidLengthError(
                    f"sample count {count} must be even for stereo output"
                )
            return count // per_frame
        case BySyncCycle(frequencies=frequencies, sampling_rate=sampling_rate):
            return sync_cycle_samples(frequencies, sampling_rate)
        case _:
            raise TypeError(f"Unknown length policy: {policy!r}")


def resolve_sample_count(policy: LengthPolicy) -> int:
    """Return the number of per-channel samples the policy asks for."""
    samples = _resolve(policy)
    if samples > MAX_SAMPLES:
        raise InvalidLengthError(
            f"{samples} samples per channel exceeds the limit of {MAX_SAMPLES}"
        )
    return samples
