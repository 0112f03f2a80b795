import io
import struct
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf  # type: ignore[import]

from wavgen import writers
from wavgen.config import ArrayOutput, WavOutput
from wavgen.errors import CreateError, WriteError
from wavgen.writers import format_array_literal, save_samples, write_array_literal, write_wav


def test_write_wav_mono_roundtrips_samples() -> None:
    samples = np.array([0, 1000, -1000, 32_767, -32_768], dtype=np.int16)
    buffer = io.BytesIO()

    write_wav(buffer, samples, channels="mono", sampling_rate=22_050)

    payload = buffer.getvalue()
    assert payload[:4] == b"RIFF"
    assert payload[8:12] == b"WAVE"
    buffer.seek(0)
    data, rate = sf.read(buffer, dtype="int16")
    assert rate == 22_050
    assert np.array_equal(data, samples)


def test_write_wav_stereo_deinterleaves_frames() -> None:
    samples = np.array([1, 1, 2, 2, -3, -3], dtype=np.int16)
    buffer = io.BytesIO()

    write_wav(buffer, samples, channels="stereo", sampling_rate=8000)

    buffer.seek(0)
    info = sf.info(buffer)
    assert info.channels == 2
    assert info.frames == 3
    assert info.subtype == "PCM_16"
    buffer.seek(0)
    data, _ = sf.read(buffer, dtype="int16")
    assert data.tolist() == [[1, 1], [2, 2], [-3, -3]]


def test_format_array_literal_wraps_ten_per_line() -> None:
    text = format_array_literal(np.arange(12, dtype=np.int16), name="wave")
    assert text == (
        "const int16_t wave[12] = {\n"
        "     0,     1,     2,     3,     4,     5,     6,     7,     8,     9,\n"
        "    10,    11\n"
        "};\n"
    )


def test_format_array_literal_fixed_width_extremes() -> None:
    text = format_array_literal(np.array([-32_768, 32_767, -1], dtype=np.int16))
    lines = text.splitlines()
    assert lines[0] == "const int16_t samples[3] = {"
    assert lines[1] == "-32768, 32767,    -1"
    assert lines[2] == "};"


def test_format_array_literal_custom_type_and_empty() -> None:
    text = format_array_literal(np.array([], dtype=np.int16), name="silence", element_type="short")
    assert text == "const short silence[0] = {\n};\n"


def test_write_array_literal_to_stream() -> None:
    stream = io.StringIO()
    write_array_literal(stream, np.array([5, -5], dtype=np.int16), name="pair")
    assert stream.getvalue() == "const int16_t pair[2] = {\n     5,    -5\n};\n"


def test_save_samples_wav(tmp_path: Path) -> None:
    samples = np.array([0, 10, 20, 30], dtype=np.int16)
    target = tmp_path / "tone.wav"

    written = save_samples(target, samples, WavOutput(), channels="stereo", sampling_rate=16_000)

    assert written == target
    data, rate = sf.read(target, dtype="int16")
    assert rate == 16_000
    assert data.tolist() == [[0, 10], [20, 30]]


def test_save_samples_array(tmp_path: Path) -> None:
    target = tmp_path / "tone.h"
    save_samples(
        target,
        np.array([1, 2, 3], dtype=np.int16),
        ArrayOutput(name="tone", element_type="int16_t"),
        channels="mono",
        sampling_rate=44_100,
    )
    assert target.read_text(encoding="utf-8") == (
        "const int16_t tone[3] = {\n     1,     2,     3\n};\n"
    )


def test_save_samples_missing_directory_is_create_error(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "tone.wav"
    with pytest.raises(CreateError) as excinfo:
        save_samples(target, np.zeros(4, dtype=np.int16), WavOutput(), channels="mono", sampling_rate=8000)
    assert excinfo.value.path == target


def test_save_samples_write_failure_is_write_error(tmp_path: Path, monkeypatch) -> None:
    def _fail(*_args: object, **_kwargs: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(writers, "write_wav", _fail)
    target = tmp_path / "tone.wav"
    with pytest.raises(WriteError) as excinfo:
        save_samples(target, np.zeros(4, dtype=np.int16), WavOutput(), channels="mono", sampling_rate=8000)
    assert excinfo.value.path == target
    assert "could not write file" in str(excinfo.value)


def test_write_wav_header_fields() -> None:
    samples = np.array([1, -1, 300, -300, 32_767, -32_768], dtype=np.int16)
    buffer = io.BytesIO()

    write_wav(buffer, samples, channels="stereo", sampling_rate=8000)

    payload = buffer.getvalue()
    riff, riff_size, wave = struct.unpack("<4sI4s", payload[:12])
    assert (riff, wave) == (b"RIFF", b"WAVE")
    assert riff_size == len(payload) - 8
    fmt_id, fmt_size, audio_format, channels, rate, byte_rate, block_align, bits = struct.unpack(
        "<4sIHHIIHH", payload[12:36]
    )
    assert (fmt_id, fmt_size, audio_format) == (b"fmt ", 16, 1)
    assert (channels, rate, byte_rate, block_align, bits) == (2, 8000, 32_000, 4, 16)
    data_id, data_size = struct.unpack("<4sI", payload[36:44])
    assert (data_id, data_size) == (b"data", samples.nbytes)
    assert payload[44:] == samples.astype("<i2").tobytes()
