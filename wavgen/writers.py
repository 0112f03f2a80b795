"""Serializers: a PCM WAV container and a C-style array literal."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any

import numpy as np
import soundfile as sf  # type: ignore[import]
from numpy.typing import NDArray

from .config import ArrayOutput, OutputFormat, WavOutput
from .errors import CreateError, WriteError
from .length import ChannelLayout, channel_count

_LOGGER = logging.getLogger("wavgen.writers")

VALUES_PER_LINE = 10
VALUE_WIDTH = 6


def write_wav(
    stream: IO[bytes],
    samples: NDArray[Any],
    *,
    channels: ChannelLayout,
    sampling_rate: int,
) -> None:
    """Write a 16-bit linear PCM WAV; interleaved samples go out verbatim."""
    per_frame = channel_count(channels)
    frames = np.asarray(samples, dtype=np.int16).reshape(-1, per_frame)
    with sf.SoundFile(
        stream,
        mode="w",
        samplerate=sampling_rate,
        channels=per_frame,
        format="WAV",
        subtype="PCM_16",
    ) as handle:
        handle.write(frames)  # type: ignore[reportUnknownMemberType]


def format_array_literal(
    samples: NDArray[Any],
    *,
    name: str = "samples",
    element_type: str = "int16_t",
) -> str:
    values = [int(value) for value in np.asarray(samples).reshape(-1)]
    rows = [
        ",".join(f"{value:>{VALUE_WIDTH}}" for value in values[index : index + VALUES_PER_LINE])
        for index in range(0, len(values), VALUES_PER_LINE)
    ]
    lines = [f"const {element_type} {name}[{len(values)}] = {{"]
    if rows:
        lines.append(",\n".join(rows))
    lines.append("};")
    return "\n".join(lines) + "\n"


def write_array_literal(
    stream: IO[str],
    samples: NDArray[Any],
    *,
    name: str = "samples",
    element_type: str = "int16_t",
) -> None:
    stream.write(format_array_literal(samples, name=name, element_type=element_type))


def save_samples(
    path: str | Path,
    samples: NDArray[Any],
    output: OutputFormat,
    *,
    channels: ChannelLayout,
    sampling_rate: int,
) -> Path:
    """Serialize samples to `path`; the file is closed on every exit path."""
    target = Path(path)
    try:
        match output:
            case WavOutput():
                handle: IO[Any] = target.open("wb")
            case ArrayOutput():
                handle = target.open("w", encoding="utf-8", newline="\n")
            case _:
                raise TypeError(f"Unknown output format: {output!r}")
    except OSError as exc:
        raise CreateError(target) from exc

    try:
        with handle:
            match output:
                case WavOutput():
                    write_wav(handle, samples, channels=channels, sampling_rate=sampling_rate)
                case ArrayOutput(name=name, element_type=element_type):
                    write_array_literal(handle, samples, name=name, element_type=element_type)
    except (OSError, sf.SoundFileError) as exc:
        raise WriteError(target) from exc

    _LOGGER.debug("Wrote %d samples to %s (%s)", samples.size, target, output.kind)
    return target
