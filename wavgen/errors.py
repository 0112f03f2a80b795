from __future__ import annotations

from pathlib import Path


class WavGenError(Exception):
    """Base error for the wavgen library."""


class InvalidConfigError(WavGenError):
    """Raised when a generation config cannot be parsed or validated."""


class ReadError(WavGenError):
    """Raised when the harmonic description cannot be opened or read."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"could not read file {str(self.path)!r}")


class WriteError(WavGenError):
    """Raised when samples cannot be written to the destination."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"could not write file {str(self.path)!r}")


class CreateError(WavGenError):
    """Raised when the destination file cannot be created."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"unable to create file {str(self.path)!r}")


class HarmonicParseError(WavGenError):
    """Raised when a data row of the harmonic description is malformed."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"parse error in harmonic file at line {line}")


class NoHarmonicsError(WavGenError):
    """Raised when a harmonic set is empty."""

    def __init__(self) -> None:
        super().__init__("no harmonics found")


class InvalidHarmonicAmplitudeError(WavGenError):
    """Raised when harmonic amplitudes sum to zero and cannot be normalized."""


class InvalidLengthError(WavGenError):
    """Raised when a requested sample count cannot be honoured."""


class UnsupportedLengthPolicyError(WavGenError):
    """Raised when a length policy does not apply to the selected generator."""
