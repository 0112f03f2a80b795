from __future__ import annotations

from .config import (
    ArrayOutput,
    CountLength,
    CycleLength,
    DurationLength,
    GenerateConfig,
    HarmonicsGenerator,
    SweepGenerator,
    ToneGenerator,
    WavOutput,
    parse_config,
)
from .errors import (
    CreateError,
    HarmonicParseError,
    InvalidConfigError,
    InvalidHarmonicAmplitudeError,
    InvalidLengthError,
    NoHarmonicsError,
    ReadError,
    UnsupportedLengthPolicyError,
    WavGenError,
    WriteError,
)
from .generators import (
    SAMPLE_RATE,
    SampleBuffer,
    generate_harmonics,
    generate_sine,
    generate_sweep,
    sweep_frequencies,
)
from .harmonics import HarmonicComponent, HarmonicSet, load_harmonics, normalize_harmonics
from .length import (
    ByDuration,
    ByExplicitCount,
    BySyncCycle,
    ChannelLayout,
    LengthPolicy,
    resolve_sample_count,
)
from .logging_utils import configure_logging as _configure_logging
from .main import build_length_policy, generate, render_samples
from .writers import format_array_literal, save_samples, write_array_literal, write_wav

__all__ = [
    "SAMPLE_RATE",
    "ArrayOutput",
    "ByDuration",
    "ByExplicitCount",
    "BySyncCycle",
    "ChannelLayout",
    "CountLength",
    "CreateError",
    "CycleLength",
    "DurationLength",
    "GenerateConfig",
    "HarmonicComponent",
    "HarmonicParseError",
    "HarmonicSet",
    "HarmonicsGenerator",
    "InvalidConfigError",
    "InvalidHarmonicAmplitudeError",
    "InvalidLengthError",
    "LengthPolicy",
    "NoHarmonicsError",
    "ReadError",
    "SampleBuffer",
    "SweepGenerator",
    "ToneGenerator",
    "UnsupportedLengthPolicyError",
    "WavGenError",
    "WavOutput",
    "WriteError",
    "build_length_policy",
    "format_array_literal",
    "generate",
    "generate_harmonics",
    "generate_sine",
    "generate_sweep",
    "load_harmonics",
    "normalize_harmonics",
    "parse_config",
    "render_samples",
    "resolve_sample_count",
    "save_samples",
    "sweep_frequencies",
    "write_array_literal",
    "write_wav",
]

__version__ = "0.1.0"

_configure_logging()
del _configure_logging
