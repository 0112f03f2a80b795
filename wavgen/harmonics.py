"""Harmonic descriptions: parsing, loading and amplitude normalization."""

from __future__ import annotations

import csv
import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from .errors import HarmonicParseError, InvalidHarmonicAmplitudeError, NoHarmonicsError, ReadError

_LOGGER = logging.getLogger("wavgen.harmonics")


@dataclass(slots=True)
class HarmonicComponent:
    """One sine layer: frequency in Hz and its relative amplitude."""

    frequency: int
    amplitude: float


HarmonicSet: TypeAlias = list[HarmonicComponent]


def _parse_row(row: Sequence[str], line: int) -> HarmonicComponent:
    match [cell.strip() for cell in row]:
        case [frequency_text, amplitude_text]:
            pass
        case _:
            raise HarmonicParseError(line)
    try:
        frequency = int(frequency_text)
        amplitude = float(amplitude_text)
    except ValueError as exc:
        raise HarmonicParseError(line) from exc
    if frequency < 0 or amplitude < 0 or not math.isfinite(amplitude):
        raise HarmonicParseError(line)
    return HarmonicComponent(frequency=frequency, amplitude=amplitude)


def parse_harmonics(lines: Iterable[str]) -> HarmonicSet:
    """Parse `frequency,amplitude` CSV text; the first row is the header.

    Data rows are numbered from 1 (file line 2). Blank rows are skipped and
    do not advance the row number. Rows the CSV reader itself rejects are
    reported against the row after the last one parsed.
    """
    reader = csv.reader(lines)
    harmonics: HarmonicSet = []
    header_seen = False
    line = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return harmonics
        except csv.Error as exc:
            raise HarmonicParseError(line + 1) from exc
        if not any(cell.strip() for cell in row):
            continue
        if not header_seen:
            header_seen = True
            continue
        line += 1
        harmonics.append(_parse_row(row, line))


def load_harmonics(path: str | Path) -> HarmonicSet:
    source = Path(path)
    try:
        with source.open("r", encoding="utf-8", newline="") as handle:
            harmonics = parse_harmonics(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(source) from exc
    _LOGGER.debug("Loaded %d harmonics from %s", len(harmonics), source)
    return harmonics


def harmonic_frequencies(harmonics: Sequence[HarmonicComponent]) -> list[int]:
    return [component.frequency for component in harmonics]


def normalize_harmonics(harmonics: HarmonicSet) -> HarmonicSet:
    """Rescale amplitudes in place so they sum to 1; returns the same list."""
    if not harmonics:
        raise NoHarmonicsError()
    total = math.fsum(component.amplitude for component in harmonics)
    if total == 0:
        raise InvalidHarmonicAmplitudeError("harmonic amplitudes sum to zero")
    scale = 1.0 / total
    for component in harmonics:
        component.amplitude *= scale
    return harmonics
