from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console

from .config import DEFAULT_OUTPUT, GenerateConfig, parse_config
from .generators import DEFAULT_VOLUME, SAMPLE_RATE
from .logging_utils import configure_logging, log_exception
from .main import generate
from .spinner import Spinner, render_error

_LOGGER = logging.getLogger("wavgen.cli")
_CONSOLE = Console()


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-o", "--output", type=Path, default=Path(DEFAULT_OUTPUT))
    common.add_argument("--volume", type=int, default=DEFAULT_VOLUME, help="Peak amplitude, 0-65535.")
    common.add_argument("--rate", type=int, default=SAMPLE_RATE, help="Sampling rate in Hz.")
    common.add_argument("--stereo", action="store_true", help="Duplicate samples into two channels.")

    length = common.add_mutually_exclusive_group()
    length.add_argument("--duration", type=float, help="Length in seconds (default 5).")
    length.add_argument("--samples", type=int, help="Total number of values across channels.")
    length.add_argument("--cycle", action="store_true", help="Exactly one synchronized cycle.")

    common.add_argument("--format", choices=["wav", "array"], default="wav")
    common.add_argument("--array-name", default="samples")
    common.add_argument("--element-type", default="int16_t")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wavgen")
    sub = parser.add_subparsers(dest="command", required=True)
    common = _common_options()

    tone = sub.add_parser("tone", parents=[common], help="Generate a pure sine tone.")
    tone.add_argument("frequency", type=int)

    sweep = sub.add_parser("sweep", parents=[common], help="Generate a linear frequency sweep.")
    sweep.add_argument("start", type=int)
    sweep.add_argument("finish", type=int)

    harmonics = sub.add_parser(
        "harmonics", parents=[common], help="Superpose harmonics from a CSV file."
    )
    harmonics.add_argument("file", type=Path)
    return parser


def config_from_args(args: argparse.Namespace) -> GenerateConfig:
    generator: dict[str, Any]
    match args.command:
        case "tone":
            generator = {"kind": "tone", "frequency": args.frequency}
        case "sweep":
            generator = {"kind": "sweep", "start": args.start, "finish": args.finish}
        case "harmonics":
            generator = {"kind": "harmonics", "path": args.file}
        case _:
            raise ValueError(f"Unknown command: {args.command}")

    length: dict[str, Any]
    if args.cycle:
        length = {"kind": "cycle"}
    elif args.samples is not None:
        length = {"kind": "count", "samples": args.samples}
    elif args.duration is not None:
        length = {"kind": "duration", "seconds": args.duration}
    else:
        length = {"kind": "duration"}

    output_format: dict[str, Any] = {"kind": args.format}
    if args.format == "array":
        output_format.update(name=args.array_name, element_type=args.element_type)

    return parse_config(
        {
            "output": args.output,
            "volume": args.volume,
            "sampling_rate": args.rate,
            "channels": "stereo" if args.stereo else "mono",
            "generator": generator,
            "length": length,
            "output_format": output_format,
        }
    )


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    try:
        args = build_parser().parse_args(argv)
        config = config_from_args(args)
        _LOGGER.debug("Resolved config: %s", config.model_dump(mode="json"))
        with Spinner(f"Generating {config.generator.kind}"):
            path = generate(config)
        _CONSOLE.print(f"Wrote {config.output_format.kind} output to {path}")
        return 0
    except Exception as exc:
        log_path = log_exception("wavgen CLI", exc)
        render_error("wavgen CLI", exc, log_path=log_path)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
