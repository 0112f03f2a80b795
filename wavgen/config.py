from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Mapping, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidConfigError
from .length import ChannelLayout

_LOGGER = logging.getLogger("wavgen.config")

MAX_VOLUME = 65_535
DEFAULT_OUTPUT = "out.wav"

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# -----------------------------------------------------------------------------
# Generators
# -----------------------------------------------------------------------------


class ToneGenerator(BaseModel):
    """Single sine tone."""

    kind: Literal["tone"] = "tone"
    frequency: int = Field(default=500, gt=0)

    model_config = _FROZEN


class SweepGenerator(BaseModel):
    """Linear frequency sweep from `start` to `finish`."""

    kind: Literal["sweep"] = "sweep"
    start: int = Field(ge=0)
    finish: int = Field(ge=0)

    model_config = _FROZEN


class HarmonicsGenerator(BaseModel):
    """Superposition of the harmonics listed in a `frequency,amplitude` file."""

    kind: Literal["harmonics"] = "harmonics"
    path: Path

    model_config = _FROZEN


GeneratorSpec: TypeAlias = Annotated[
    ToneGenerator | SweepGenerator | HarmonicsGenerator, Field(discriminator="kind")
]


# -----------------------------------------------------------------------------
# Length selectors
# -----------------------------------------------------------------------------


class DurationLength(BaseModel):
    kind: Literal["duration"] = "duration"
    seconds: float = Field(default=5.0, gt=0)

    model_config = _FROZEN


class CountLength(BaseModel):
    """Total number of values written, across all channels."""

    kind: Literal["count"] = "count"
    samples: int = Field(gt=0)

    model_config = _FROZEN


class CycleLength(BaseModel):
    """One synchronized cycle of every generated frequency."""

    kind: Literal["cycle"] = "cycle"

    model_config = _FROZEN


LengthSpec: TypeAlias = Annotated[
    DurationLength | CountLength | CycleLength, Field(discriminator="kind")
]


# -----------------------------------------------------------------------------
# Output formats
# -----------------------------------------------------------------------------


class WavOutput(BaseModel):
    kind: Literal["wav"] = "wav"

    model_config = _FROZEN


class ArrayOutput(BaseModel):
    kind: Literal["array"] = "array"
    name: str = Field(default="samples", min_length=1)
    element_type: str = Field(default="int16_t", min_length=1)

    model_config = _FROZEN


OutputFormat: TypeAlias = WavOutput | ArrayOutput
OutputSpec: TypeAlias = Annotated[OutputFormat, Field(discriminator="kind")]


class GenerateConfig(BaseModel):
    """Flat, validated description of one generation run."""

    output: Path = Path(DEFAULT_OUTPUT)
    volume: int = Field(default=10_000, ge=0, le=MAX_VOLUME)
    sampling_rate: int = Field(default=44_100, gt=0)
    channels: ChannelLayout = "mono"
    generator: GeneratorSpec = Field(default_factory=ToneGenerator)
    length: LengthSpec = Field(default_factory=DurationLength)
    output_format: OutputSpec = Field(default_factory=WavOutput)

    model_config = _FROZEN


def parse_config(data: Mapping[str, Any]) -> GenerateConfig:
    """Validate raw settings, converting pydantic failures to InvalidConfigError."""
    try:
        return GenerateConfig.model_validate(dict(data))
    except ValidationError as exc:
        _LOGGER.debug("Rejected config: %s", exc)
        raise InvalidConfigError(str(exc)) from exc
