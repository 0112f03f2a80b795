from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wavgen.config import (
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
from wavgen.errors import InvalidConfigError


def test_defaults_describe_five_second_tone() -> None:
    config = GenerateConfig()
    assert config.output == Path("out.wav")
    assert config.volume == 10_000
    assert config.sampling_rate == 44_100
    assert config.channels == "mono"
    assert config.generator == ToneGenerator(frequency=500)
    assert config.length == DurationLength(seconds=5.0)
    assert config.output_format == WavOutput()


def test_tagged_sections_are_selected_by_kind() -> None:
    config = GenerateConfig.model_validate(
        {
            "channels": "stereo",
            "generator": {"kind": "sweep", "start": 20, "finish": 20_000},
            "length": {"kind": "count", "samples": 1000},
            "output_format": {"kind": "array", "name": "chirp"},
        }
    )
    assert config.channels == "stereo"
    assert config.generator == SweepGenerator(start=20, finish=20_000)
    assert config.length == CountLength(samples=1000)
    assert config.output_format == ArrayOutput(name="chirp", element_type="int16_t")


def test_harmonics_and_cycle_sections() -> None:
    config = GenerateConfig.model_validate(
        {"generator": {"kind": "harmonics", "path": "h.csv"}, "length": {"kind": "cycle"}}
    )
    assert config.generator == HarmonicsGenerator(path=Path("h.csv"))
    assert isinstance(config.length, CycleLength)


@pytest.mark.parametrize(
    "payload",
    [
        {"volume": 65_536},
        {"volume": -1},
        {"sampling_rate": 0},
        {"channels": "quad"},
        {"generator": {"kind": "square"}},
        {"length": {"kind": "duration", "seconds": 0}},
        {"length": {"kind": "count", "samples": 0}},
        {"output_format": {"kind": "array", "name": ""}},
        {"unknown": True},
    ],
)
def test_invalid_configs_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        GenerateConfig.model_validate(payload)


def test_parse_config_wraps_validation_errors() -> None:
    with pytest.raises(InvalidConfigError):
        parse_config({"volume": 100_000})


def test_parse_config_accepts_full_volume_range() -> None:
    assert parse_config({"volume": 65_535}).volume == 65_535


def test_config_is_frozen() -> None:
    config = GenerateConfig()
    with pytest.raises(ValidationError):
        config.volume = 5  # type: ignore[misc]
